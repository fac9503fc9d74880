"""Double-entry bookkeeping with encrypted per-user ledgers, reports and calendar/calculator helpers."""

__version__ = "0.1.0"

__all__ = [
    "account",
    "crypto",
    "ledger",
    "manager",
    "report",
    "transaction",
    "widgets",
]