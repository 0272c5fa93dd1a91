"""Bridge implementations that hand out a preconfigured address."""

import os
from typing import Optional

from observatory.bridge.base import WalletBridge
from observatory.errors import ExternalWalletRejected, ExternalWalletUnavailable

ENV_ADDRESS = "OBSERVATORY_EXTERNAL_ADDRESS"


class StaticBridge(WalletBridge):
    """Bridge returning a fixed address.

    Args:
        address: Address to expose, or None to simulate a missing extension.
        approve: Whether the simulated operator approves the connection.
    """

    name = "static"

    def __init__(self, address: Optional[str], approve: bool = True):
        self._address = address
        self._approve = approve

    def connect(self) -> str:
        if not self._address:
            raise ExternalWalletUnavailable("No signing extension detected.")
        if not self._approve:
            raise ExternalWalletRejected("Connection request was declined.")
        return self._address


class EnvBridge(StaticBridge):
    """Bridge reading its address from the OBSERVATORY_EXTERNAL_ADDRESS variable."""

    name = "env"

    def __init__(self, approve: bool = True):
        super().__init__(os.environ.get(ENV_ADDRESS), approve=approve)
