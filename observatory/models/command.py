"""CommandLogEntry data model."""

from pydantic import BaseModel, Field


class CommandLogEntry(BaseModel):
    """Represents one line of the scrolling command log."""

    actor: str = Field(..., min_length=1, description="Actor tag (system, blocks, wallet, ...)")
    message: str = Field(..., description="Log message")

    model_config = {"frozen": True}
