"""Observatory - synthetic ledger and market telemetry engine."""

__version__ = "0.1.0"
