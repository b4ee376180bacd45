"""Error types raised by the ledger and at the input boundary."""


class LedgerError(Exception):
    """Base class for expense tracker errors."""


class StorageError(LedgerError):
    """The underlying storage medium is unavailable or a write failed."""


class ValidationError(LedgerError):
    """User input was rejected before reaching the store."""
