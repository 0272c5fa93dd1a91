"""Base interface for external wallet bridges."""

from abc import ABC, abstractmethod


class WalletBridge(ABC):
    """Abstract base class for signing-extension bridges.

    A bridge is an opaque collaborator: the engine only ever asks it
    for an address string. Bridges never touch engine state.
    """

    name: str = "bridge"

    @abstractmethod
    def connect(self) -> str:
        """Ask the extension for the operator's address.

        Returns:
            The address exposed by the extension.

        Raises:
            ExternalWalletUnavailable: If no extension is reachable.
            ExternalWalletRejected: If the operator declines the request.
        """
        pass
