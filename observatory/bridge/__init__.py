"""External signing-extension bridges for Observatory."""

from observatory.bridge.base import WalletBridge
from observatory.bridge.static import EnvBridge, StaticBridge

__all__ = [
    "EnvBridge",
    "StaticBridge",
    "WalletBridge",
]
