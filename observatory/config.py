"""Configuration loading for Observatory.

Settings live in ``~/.config/observatory/config.toml``. Every section
is optional; anything missing falls back to the defaults below.
"""

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from observatory.errors import ConfigError
from observatory.sim.candles import CandleBaseline
from observatory.sim.roster import BASE_HEIGHT

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "observatory" / "config.toml"


class TimerConfig(BaseModel):
    """Periods (seconds) of the background generators."""

    command_log_period: float = Field(default=6.2, gt=0, description="Command-log rotation period")
    block_period: float = Field(default=5.8, gt=0, description="Block generation period")
    candle_period: float = Field(default=5.0, gt=0, description="Candle generation period")


class WindowConfig(BaseModel):
    """Capacities of the bounded buffers."""

    blocks: int = Field(default=6, ge=1, description="Block ring size")
    candles: int = Field(default=24, ge=1, description="Candle window size")
    faucet_history: int = Field(default=5, ge=1, description="Faucet history size")
    command_log: int = Field(default=8, ge=1, description="Command log size")


class WalletConfig(BaseModel):
    """Wallet seeding rules."""

    seed_balance: float = Field(default=512.5, ge=0, description="Balance of a generated wallet")
    external_seed_balance: float = Field(
        default=512.5, ge=0, description="Balance granted on the first external link"
    )


class FaucetConfig(BaseModel):
    """Faucet disbursement rules."""

    min_amount: int = Field(default=24, gt=0, description="Minimum whole drip amount")
    max_amount: int = Field(default=96, gt=0, description="Maximum whole drip amount")
    settlement_delay: float = Field(default=1.8, ge=0, description="Seconds before a drip settles")

    @model_validator(mode="after")
    def _check_range(self) -> "FaucetConfig":
        if self.min_amount > self.max_amount:
            raise ValueError("min_amount must not exceed max_amount")
        return self


class MarketConfig(BaseModel):
    """Candle series starting point."""

    baseline: CandleBaseline = Field(default_factory=CandleBaseline)
    base_height: int = Field(default=BASE_HEIGHT, ge=0, description="Height of the newest seeded block")


class EngineConfig(BaseModel):
    """Complete engine configuration."""

    timers: TimerConfig = Field(default_factory=TimerConfig)
    windows: WindowConfig = Field(default_factory=WindowConfig)
    wallet: WalletConfig = Field(default_factory=WalletConfig)
    faucet: FaucetConfig = Field(default_factory=FaucetConfig)
    market: MarketConfig = Field(default_factory=MarketConfig)
    seed_history: bool = Field(default=True, description="Seed blocks, candles and ledger on start")

    model_config = {"frozen": True}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EngineConfig":
        """Build a config from a parsed TOML document.

        Raises:
            ConfigError: If a value fails validation.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(path: Optional[Path] = None) -> EngineConfig:
    """Load the engine configuration.

    Args:
        path: Optional config file path. Defaults to DEFAULT_CONFIG_PATH.

    Returns:
        EngineConfig; defaults when the file does not exist.

    Raises:
        ConfigError: If the file exists but cannot be parsed or validated.
    """
    import toml

    config_path = path or DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return EngineConfig()

    try:
        data = toml.load(config_path)
    except (toml.TomlDecodeError, OSError) as e:
        raise ConfigError(f"Could not read {config_path}: {e}") from e

    return EngineConfig.from_dict(data)


def write_default_config(path: Optional[Path] = None) -> Path:
    """Write a config file holding the default values.

    Args:
        path: Destination. Defaults to DEFAULT_CONFIG_PATH.

    Returns:
        Path of the written file.
    """
    import toml

    config_path = path or DEFAULT_CONFIG_PATH
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        toml.dump(EngineConfig().model_dump(), f)

    return config_path
