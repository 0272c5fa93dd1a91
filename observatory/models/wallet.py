"""WalletState data model."""

from typing import Optional
from pydantic import BaseModel, Field


class WalletState(BaseModel):
    """Represents the operator's research wallet."""

    address: Optional[str] = Field(
        default=None, description="Wallet address (absent until generated or linked)"
    )
    balance: float = Field(default=0.0, ge=0, description="Available balance")

    model_config = {"frozen": True}

    @property
    def has_address(self) -> bool:
        """Whether the wallet has been generated or linked."""
        return bool(self.address)
