"""Utility modules."""

from .exceptions import (
    ReconciliationError,
    LedgerReadError,
    LedgerFormatError,
    RecordParseError,
    ConfigurationError,
    MatchError,
)
from .logging_config import setup_logging
from .money import parse_cents, format_amount

__all__ = [
    "ReconciliationError",
    "LedgerReadError",
    "LedgerFormatError",
    "RecordParseError",
    "ConfigurationError",
    "MatchError",
    "setup_logging",
    "parse_cents",
    "format_amount",
]
