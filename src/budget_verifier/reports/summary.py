"""Shaping reconciliation results into summaries and tables."""

from typing import Optional, Sequence

import pandas as pd

from ..models.transaction import (
    ReconciliationResult,
    ReconciliationSummary,
    Transaction,
)
from ..utils.money import format_amount

FRAME_COLUMNS = ["date", "description", "details", "amount", "matched_with"]


def build_summary(
    result: ReconciliationResult,
    bank_filename: str = "",
    budget_filename: str = "",
    date_match_range_days: int = 7,
) -> ReconciliationSummary:
    """
    Summarize a reconciliation result.

    Args:
        result: Reconciliation result
        bank_filename: Name of the bank statement file
        budget_filename: Name of the budget export file
        date_match_range_days: Date window the run used

    Returns:
        Reconciliation summary object
    """
    return ReconciliationSummary(
        bank_filename=bank_filename,
        budget_filename=budget_filename,
        total_bank_transactions=len(result.bank_transactions),
        total_budget_transactions=len(result.budget_transactions),
        matched_count=len(result.matches),
        missing_count=len(result.missing),
        filtered_count=len(result.filtered),
        unmatched_budget_count=len(result.unmatched_budget),
        ambiguous_count=result.ambiguous_count,
        bank_total=sum(t.amount for t in result.bank_transactions),
        budget_total=sum(t.amount for t in result.budget_transactions),
        missing_total=sum(t.amount for t in result.missing),
        date_match_range_days=date_match_range_days,
    )


def transactions_frame(
    transactions: Sequence[Transaction],
    result: Optional[ReconciliationResult] = None,
) -> pd.DataFrame:
    """
    Build a DataFrame of transactions for display.

    Amounts stay in integer cents; ``matched_with`` holds the counterpart
    rendered as text when a result is given and the transaction is matched.
    """
    rows = []
    for txn in transactions:
        counterpart = result.counterpart(txn) if result is not None else None
        rows.append(
            {
                "date": txn.timestamp,
                "description": txn.description,
                "details": txn.details,
                "amount": txn.amount,
                "matched_with": counterpart.describe() if counterpart else "",
            }
        )

    frame = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    frame["amount"] = frame["amount"].astype("int64")
    return frame


def format_frame(frame: pd.DataFrame) -> str:
    """Render a transactions frame as text with amounts in currency units."""
    if frame.empty:
        return "(no transactions)"

    display = frame.copy()
    display["amount"] = display["amount"].map(lambda cents: format_amount(int(cents)))
    return display.to_string(index=False)
