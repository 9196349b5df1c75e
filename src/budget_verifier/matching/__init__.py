"""Filter rules, matching engine and strategies."""

from .engine import ReconciliationEngine, reconcile
from .filters import is_filtered, load_filters, partition_filtered
from .strategies import MatchingStrategy, ClosestPriorDateStrategy

__all__ = [
    "ReconciliationEngine",
    "reconcile",
    "is_filtered",
    "load_filters",
    "partition_filtered",
    "MatchingStrategy",
    "ClosestPriorDateStrategy",
]
