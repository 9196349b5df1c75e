"""
Matching strategies for bank/budget reconciliation.
A strategy picks the budget entry that best accounts for a bank transaction.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..models.transaction import Transaction


class MatchingStrategy(ABC):
    """Abstract base class for matching strategies."""

    @abstractmethod
    def select(
        self,
        bank_txn: Transaction,
        candidates: Sequence[Transaction],
    ) -> Optional[Transaction]:
        """
        Pick the best candidate for a bank transaction.

        Args:
            bank_txn: Bank transaction to match
            candidates: Unmatched budget entries with the same amount, in
                input order

        Returns:
            Best candidate, or None if none is eligible
        """
        pass

    @abstractmethod
    def accepts(self, bank_txn: Transaction, candidate: Transaction) -> bool:
        """Decide whether the selected candidate is close enough to match."""
        pass

    @abstractmethod
    def describe_match(self, bank_txn: Transaction, candidate: Transaction) -> str:
        """Explain why the pair was matched."""
        pass


class ClosestPriorDateStrategy(MatchingStrategy):
    """
    Match the budget entry logged closest to, but not after, the bank date.

    Budget entries are written when a purchase happens and bank items appear
    when it clears, so a budget entry dated after the bank item never
    qualifies. The closest entry must also fall strictly inside the date
    window, so an entry exactly ``date_match_range_days`` away is rejected and
    a window of zero matches nothing.
    """

    def __init__(self, date_match_range_days: int = 7):
        """
        Initialize with the date window.

        Args:
            date_match_range_days: Days between the two entries at which matching stops
        """
        self.date_match_range_days = date_match_range_days

    @staticmethod
    def delta_days(bank_txn: Transaction, candidate: Transaction) -> int:
        """Days from the budget entry to the bank date (negative if later)."""
        return (bank_txn.timestamp - candidate.timestamp).days

    def select(
        self,
        bank_txn: Transaction,
        candidates: Sequence[Transaction],
    ) -> Optional[Transaction]:
        """Find the candidate with the smallest non-negative delta, first wins ties."""
        closest: Optional[Transaction] = None
        closest_delta: Optional[int] = None

        for candidate in candidates:
            delta = self.delta_days(bank_txn, candidate)
            if delta < 0:
                continue
            if closest_delta is None or delta < closest_delta:
                closest = candidate
                closest_delta = delta

        return closest

    def accepts(self, bank_txn: Transaction, candidate: Transaction) -> bool:
        """Check the candidate falls strictly inside the date window."""
        return abs(self.delta_days(bank_txn, candidate)) < self.date_match_range_days

    def describe_match(self, bank_txn: Transaction, candidate: Transaction) -> str:
        delta = self.delta_days(bank_txn, candidate)
        if delta == 0:
            return "Exact amount, same date"
        return f"Exact amount, budget entry {delta} day(s) before bank date"
