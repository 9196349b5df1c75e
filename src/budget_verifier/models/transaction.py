"""Data models for ledger transactions and reconciliation results."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from ..utils.exceptions import MatchError
from ..utils.money import format_amount


class LedgerSource(Enum):
    """Ledger a transaction was read from."""

    BANK = "bank"
    BUDGET = "budget"


@dataclass
class Transaction:
    """
    A single ledger entry.

    Transactions have no identity beyond their fields and their position in
    the ledger they came from. The reconciliation engine pairs a bank entry
    with a budget entry by storing the counterpart's ``index`` in ``matching``
    on both sides.
    """

    timestamp: date

    description: str

    # Signed minor units (cents), sign gives debit/credit
    amount: int

    # Secondary label, only present in budget exports
    details: str = ""

    source: LedgerSource = LedgerSource.BANK

    # Position within the parsed ledger
    index: int = 0

    # Index of the counterpart in the other ledger, set once per run
    matching: Optional[int] = None

    @property
    def is_matched(self) -> bool:
        return self.matching is not None

    def link(self, other: "Transaction") -> None:
        """
        Pair this transaction with one from the other ledger.

        Raises:
            MatchError: If either side is already matched or both sides come
                from the same ledger
        """
        if self.source == other.source:
            raise MatchError(
                f"cannot match two {self.source.value} transactions: {self.describe()}"
            )
        if self.matching is not None or other.matching is not None:
            raise MatchError(
                f"transaction already matched: {self.describe()} / {other.describe()}"
            )

        self.matching = other.index
        other.matching = self.index

    def describe(self) -> str:
        """Render the transaction without following its match."""
        return (
            f"[{self.timestamp.isoformat()}: '{self.description}', "
            f"'{self.details}', {format_amount(self.amount)}]"
        )

    def __str__(self) -> str:
        return self.describe()


@dataclass
class MatchResult:
    """A bank transaction paired with the budget entry that accounts for it."""

    bank_transaction: Transaction
    budget_transaction: Transaction

    # Days between the budget entry and the bank clearing date (>= 0)
    date_variance_days: int

    match_reason: str = ""

    # Number of same-amount candidates that were available
    candidate_count: int = 1

    @property
    def is_exact_match(self) -> bool:
        """Check if both entries carry the same date."""
        return self.date_variance_days == 0


@dataclass
class ReconciliationResult:
    """Outcome of reconciling a bank statement against a budget log."""

    bank_transactions: list[Transaction]
    budget_transactions: list[Transaction]

    matches: list[MatchResult] = field(default_factory=list)

    # Bank transactions with no acceptable budget entry, in input order
    missing: list[Transaction] = field(default_factory=list)

    # Bank transactions excluded by filter rules before matching
    filtered: list[Transaction] = field(default_factory=list)

    # Bank transactions that had more than one same-amount candidate
    ambiguous_count: int = 0

    def counterpart(self, transaction: Transaction) -> Optional[Transaction]:
        """Return the transaction linked to ``transaction``, if any."""
        if transaction.matching is None:
            return None

        if transaction.source == LedgerSource.BANK:
            return self.budget_transactions[transaction.matching]

        # Bank lists may be a filtered subset, so look up by index
        bank_by_index = {t.index: t for t in self.bank_transactions}
        return bank_by_index.get(transaction.matching)

    @property
    def unmatched_budget(self) -> list[Transaction]:
        """Budget entries that no bank transaction claimed."""
        return [t for t in self.budget_transactions if t.matching is None]

    @property
    def has_missing(self) -> bool:
        return bool(self.missing)


@dataclass
class ReconciliationSummary:
    """Summary counts and totals of a reconciliation run."""

    bank_filename: str
    budget_filename: str

    total_bank_transactions: int
    total_budget_transactions: int

    matched_count: int
    missing_count: int
    filtered_count: int
    unmatched_budget_count: int
    ambiguous_count: int

    # Totals in cents
    bank_total: int
    budget_total: int
    missing_total: int

    date_match_range_days: int = 7

    @property
    def considered_count(self) -> int:
        """Bank transactions that went through matching."""
        return self.total_bank_transactions - self.filtered_count

    @property
    def match_rate_bank(self) -> float:
        """Percentage of considered bank transactions that were matched."""
        if self.considered_count == 0:
            return 0.0
        return (self.matched_count / self.considered_count) * 100
