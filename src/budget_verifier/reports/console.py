"""
Console report for reconciliation results.
Renders summary, missing and verbose dumps with rich.
"""

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models.transaction import (
    ReconciliationResult,
    ReconciliationSummary,
    Transaction,
)
from ..utils.money import format_amount
from .summary import format_frame, transactions_frame

SUCCESS_MESSAGE = "There are no missing transactions.  Good job budgeter!"


class ConsoleReporter:
    """Prints reconciliation results to a rich console."""

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console or Console()
        self.verbose = verbose

    def render(self, result: ReconciliationResult, summary: ReconciliationSummary) -> None:
        """Print the full report for a run."""
        self.render_summary(summary)

        if self.verbose:
            self.render_filtered(result.filtered)

        self.render_missing(result.missing)

        if self.verbose:
            self.render_dump(result)

    def render_summary(self, summary: ReconciliationSummary) -> None:
        table = Table(title="Reconciliation Summary")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")

        table.add_row("Bank File", escape(summary.bank_filename))
        table.add_row("Budget File", escape(summary.budget_filename))
        table.add_row("Total Bank Transactions", str(summary.total_bank_transactions))
        table.add_row("Total Budget Transactions", str(summary.total_budget_transactions))
        table.add_row("Filtered", str(summary.filtered_count))
        table.add_row("Matched", str(summary.matched_count))
        table.add_row("Missing From Budget", str(summary.missing_count))
        table.add_row("Unclaimed Budget Entries", str(summary.unmatched_budget_count))
        table.add_row("Ambiguous Bank Items", str(summary.ambiguous_count))
        table.add_row("Date Window (days)", str(summary.date_match_range_days))
        table.add_row("Bank Match Rate", f"{summary.match_rate_bank:.1f}%")
        table.add_row("Missing Total", format_amount(summary.missing_total))

        self.console.print(table)

    def render_missing(self, missing: Sequence[Transaction]) -> None:
        """Print the missing transactions, or the success message if there are none."""
        if not missing:
            self.console.print(f"\n[green]{SUCCESS_MESSAGE}[/green]")
            return

        table = Table(title=f"There are {len(missing)} missing transactions")
        table.add_column("Date")
        table.add_column("Description")
        table.add_column("Details")
        table.add_column("Amount", justify="right")

        for txn in missing:
            table.add_row(
                txn.timestamp.isoformat(),
                escape(txn.description),
                escape(txn.details) or "-",
                format_amount(txn.amount),
            )

        self.console.print(table)

    def render_filtered(self, filtered: Sequence[Transaction]) -> None:
        self.console.print(f"\n[yellow]Filtered transactions ({len(filtered)}):[/yellow]")
        for txn in filtered:
            self.console.print(f"  filtered {txn.describe()}", markup=False)

    def render_dump(self, result: ReconciliationResult) -> None:
        """Print every bank and budget transaction with its counterpart."""
        self.console.print("\n[bold]Bank transactions[/bold]")
        self.console.print(
            format_frame(transactions_frame(result.bank_transactions, result)),
            markup=False,
        )
        self.console.print("\n[bold]Budget transactions[/bold]")
        self.console.print(
            format_frame(transactions_frame(result.budget_transactions, result)),
            markup=False,
        )
