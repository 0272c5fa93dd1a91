"""Error taxonomy for Observatory."""

from enum import Enum


class RejectionReason(str, Enum):
    """Reasons a command can be rejected at the command surface."""

    NO_WALLET = "NoWallet"
    INVALID_AMOUNT = "InvalidAmount"
    INSUFFICIENT_BALANCE = "InsufficientBalance"
    MISSING_RECIPIENT = "MissingRecipient"
    FAUCET_PENDING = "FaucetPending"
    EXTERNAL_WALLET_UNAVAILABLE = "ExternalWalletUnavailable"
    EXTERNAL_WALLET_REJECTED = "ExternalWalletRejected"


class ObservatoryError(Exception):
    """Base class for Observatory exceptions."""


class ConfigError(ObservatoryError):
    """Raised when a configuration file cannot be used."""


class ExternalWalletError(ObservatoryError):
    """Base class for signing-extension bridge failures."""

    reason: RejectionReason


class ExternalWalletUnavailable(ExternalWalletError):
    """No signing extension is installed or reachable."""

    reason = RejectionReason.EXTERNAL_WALLET_UNAVAILABLE


class ExternalWalletRejected(ExternalWalletError):
    """The operator declined the connection request."""

    reason = RejectionReason.EXTERNAL_WALLET_REJECTED
