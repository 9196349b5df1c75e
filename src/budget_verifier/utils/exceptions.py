"""Custom exceptions for the budget verifier."""


class ReconciliationError(Exception):
    """Base exception for reconciliation errors."""

    pass


class LedgerReadError(ReconciliationError):
    """Error reading a ledger file from disk."""

    pass


class LedgerFormatError(ReconciliationError):
    """Ledger file does not have the expected layout."""

    pass


class RecordParseError(ReconciliationError):
    """Error parsing a single ledger row."""

    pass


class ConfigurationError(ReconciliationError):
    """Error in configuration or filter file."""

    pass


class MatchError(ReconciliationError):
    """Attempt to link a transaction that is already matched."""

    pass
