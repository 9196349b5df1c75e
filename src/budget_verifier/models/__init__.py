"""Data models for reconciliation."""

from .transaction import (
    Transaction,
    LedgerSource,
    MatchResult,
    ReconciliationResult,
    ReconciliationSummary,
)
from .filter_rule import FilterRule

__all__ = [
    "Transaction",
    "LedgerSource",
    "MatchResult",
    "ReconciliationResult",
    "ReconciliationSummary",
    "FilterRule",
]
