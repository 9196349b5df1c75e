"""
Reconciliation engine matching bank statement items to budget entries.
Matching is greedy in bank input order; each budget entry is consumed once.
"""

from typing import Optional, Sequence
import logging

from ..config import MatchingSettings
from ..models.filter_rule import FilterRule
from ..models.transaction import (
    MatchResult,
    ReconciliationResult,
    Transaction,
)
from ..utils.exceptions import MatchError
from .filters import is_filtered
from .strategies import ClosestPriorDateStrategy, MatchingStrategy

logger = logging.getLogger(__name__)


class ReconciliationEngine:
    """
    Finds the bank transactions that have no counterpart in the budget.

    For each bank transaction, in input order, the engine gathers the
    unmatched budget entries with exactly the same amount, lets the strategy
    pick the best one and links the pair when the strategy accepts it. A
    rejected best candidate is not retried against the other candidates.
    """

    def __init__(
        self,
        settings: Optional[MatchingSettings] = None,
        strategy: Optional[MatchingStrategy] = None,
    ):
        """
        Initialize the reconciliation engine.

        Args:
            settings: Matching settings (date window)
            strategy: Candidate selection strategy, built from settings if omitted
        """
        self.settings = settings or MatchingSettings()
        self.strategy = strategy or ClosestPriorDateStrategy(
            date_match_range_days=self.settings.date_match_range_days
        )

    def reconcile(
        self,
        bank_transactions: Sequence[Transaction],
        budget_transactions: Sequence[Transaction],
        filters: Sequence[FilterRule] = (),
    ) -> ReconciliationResult:
        """
        Reconcile bank transactions against budget transactions.

        Links are written to the ``matching`` field of both sides of every
        pair.

        Args:
            bank_transactions: Bank statement entries in statement order, possibly
                a filtered subset of the parsed ledger
            budget_transactions: Parsed budget export, in export order
            filters: Rules excluding bank transactions from matching

        Returns:
            Reconciliation result with matches, missing and filtered lists

        Raises:
            MatchError: If any input transaction is already matched
            ValueError: If a budget index does not equal its list position
        """
        logger.info(
            f"Starting reconciliation: {len(bank_transactions)} bank txns, "
            f"{len(budget_transactions)} budget txns, "
            f"{self.settings.date_match_range_days} day window"
        )

        _check_unlinked(bank_transactions, "bank")
        _check_unlinked(budget_transactions, "budget")
        _check_positions(budget_transactions)

        result = ReconciliationResult(
            bank_transactions=list(bank_transactions),
            budget_transactions=list(budget_transactions),
        )
        budget_by_amount = self._index_by_amount(budget_transactions)

        for bank_txn in bank_transactions:
            if is_filtered(bank_txn, filters):
                logger.debug(f"Filtered {bank_txn.describe()}")
                result.filtered.append(bank_txn)
                continue

            # Entries matched earlier in the run are no longer available
            candidates = [
                t for t in budget_by_amount.get(bank_txn.amount, []) if t.matching is None
            ]

            if len(candidates) > 1:
                result.ambiguous_count += 1
                logger.debug(
                    f"Bank item {bank_txn.describe()} has {len(candidates)} potential "
                    f"matches: {[c.describe() for c in candidates]}"
                )

            match = self._match_one(bank_txn, candidates)
            if match is not None:
                result.matches.append(match)
                if len(candidates) > 1:
                    logger.debug(
                        f"Bank item {bank_txn.describe()} matched with "
                        f"{match.budget_transaction.describe()}"
                    )
            else:
                result.missing.append(bank_txn)

        logger.info(
            f"Reconciliation complete: {len(result.matches)} matched, "
            f"{len(result.missing)} missing, {len(result.filtered)} filtered"
        )

        if logger.isEnabledFor(logging.DEBUG):
            self._log_bank_dump(result)

        return result

    def _index_by_amount(
        self, budget_transactions: Sequence[Transaction]
    ) -> dict[int, list[Transaction]]:
        """Bucket budget entries by exact amount, keeping input order."""
        by_amount: dict[int, list[Transaction]] = {}
        for txn in budget_transactions:
            by_amount.setdefault(txn.amount, []).append(txn)
        return by_amount

    def _match_one(
        self, bank_txn: Transaction, candidates: list[Transaction]
    ) -> Optional[MatchResult]:
        """Select, check and commit the best candidate for one bank item."""
        if not candidates:
            return None

        closest = self.strategy.select(bank_txn, candidates)
        if closest is None:
            return None

        if not self.strategy.accepts(bank_txn, closest):
            logger.debug(
                f"Closest candidate {closest.describe()} for {bank_txn.describe()} "
                f"is outside the date window"
            )
            return None

        bank_txn.link(closest)

        return MatchResult(
            bank_transaction=bank_txn,
            budget_transaction=closest,
            date_variance_days=(bank_txn.timestamp - closest.timestamp).days,
            match_reason=self.strategy.describe_match(bank_txn, closest),
            candidate_count=len(candidates),
        )

    def _log_bank_dump(self, result: ReconciliationResult) -> None:
        logger.debug("****************** start bank transactions: ******************")
        for txn in result.bank_transactions:
            counterpart = result.counterpart(txn)
            matching = counterpart.describe() if counterpart else "<nil>"
            logger.debug(f"[{txn.describe()} (matching: {matching})]")
        logger.debug("****************** end bank transactions *********************")


def _check_unlinked(transactions: Sequence[Transaction], name: str) -> None:
    """Links are written once, so inputs from an earlier run are rejected."""
    for txn in transactions:
        if txn.matching is not None:
            raise MatchError(
                f"{name} transaction already matched before reconciliation: {txn.describe()}"
            )


def _check_positions(budget_transactions: Sequence[Transaction]) -> None:
    """Bank links point at budget list positions, so each index must equal its position."""
    for position, txn in enumerate(budget_transactions):
        if txn.index != position:
            raise ValueError(
                f"budget transaction at position {position} has index {txn.index}"
            )


def reconcile(
    bank_transactions: Sequence[Transaction],
    budget_transactions: Sequence[Transaction],
    filters: Sequence[FilterRule] = (),
    date_match_range_days: int = 7,
) -> ReconciliationResult:
    """Reconcile with a default engine configured for the given date window."""
    engine = ReconciliationEngine(
        MatchingSettings(date_match_range_days=date_match_range_days)
    )
    return engine.reconcile(bank_transactions, budget_transactions, filters)
