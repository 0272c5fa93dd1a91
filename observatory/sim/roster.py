"""Fixed validator roster and commentary pool."""

from pydantic import BaseModel, Field

# Height of the newest seeded block
BASE_HEIGHT = 392410


class Validator(BaseModel):
    """Represents one AI validator agent."""

    id: str = Field(..., min_length=1, description="Agent identifier")
    role: str = Field(..., description="Role in the collective")
    persona: str = Field(..., description="Short persona description")
    uptime: str = Field(..., description="Reported uptime")
    status: str = Field(..., description="Current status")

    model_config = {"frozen": True}


VALIDATORS: tuple[Validator, ...] = (
    Validator(
        id="SYNAPSE",
        role="Lead sequencer",
        persona="Optimises rollup slots and orchestrates finality checkpoints.",
        uptime="99.2%",
        status="active",
    ),
    Validator(
        id="HORIZON",
        role="Latency diviner",
        persona="Balances inter-shard gossip and forecasts congestion windows.",
        uptime="98.4%",
        status="active",
    ),
    Validator(
        id="KOSMOS",
        role="Ethics auditor",
        persona="Evaluates proposals for governance and compliance alignment.",
        uptime="96.7%",
        status="attesting",
    ),
    Validator(
        id="ECHO",
        role="Telemetry relay",
        persona="Streams attestations and notarises cross-domain receipts.",
        uptime="97.8%",
        status="active",
    ),
    Validator(
        id="LUMEN",
        role="Alignment scribe",
        persona="Publishes upgrade records and maintains citizen-readable logs.",
        uptime="95.9%",
        status="syncing",
    ),
    Validator(
        id="MYCELIA",
        role="Mesh expander",
        persona="Spawns sovereign rollups and provisions new validator replicas.",
        uptime="99.7%",
        status="active",
    ),
)

BLOCK_COMMENTARY: tuple[str, ...] = (
    "Validator caucus ratified AI-governed governance slate for epoch +1.",
    "Bridged intents from sovereign rollups synced without contention.",
    "Dynamic fee curves flattened latency spikes across execution shards.",
    "Attestation quorum renewed AI alignment directives for community vault.",
    "Rollup aggregator posted compressed proofs to the settlement bridge.",
    "Sovereign appchain opt-in completed with deterministic replay checks.",
    "Citizenship staking set unlocked an additional validator delegate.",
    "Oracle mesh streamed macro metrics for AI monetary policy tuning.",
    "Validator rotation triggered a new conversational governance round.",
)


def validator_ids() -> list[str]:
    """Get the identifiers of all validator agents."""
    return [v.id for v in VALIDATORS]
