"""
Command-line interface for the budget verifier.
"""

from pathlib import Path
from typing import Optional
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import load_config, generate_default_config, ReconConfig
from .matching.engine import ReconciliationEngine
from .matching.filters import load_filters
from .models.transaction import Transaction
from .parsers.bank_parser import BankStatementParser
from .parsers.budget_parser import BudgetParser
from .reports.console import ConsoleReporter
from .reports.summary import build_summary
from .utils.exceptions import ReconciliationError
from .utils.logging_config import setup_logging, level_from_name
from .utils.money import format_amount

console = Console()

PREVIEW_ROWS = 20


@click.group()
@click.version_option(version=__version__)
def main():
    """Find bank statement transactions missing from a budget log."""
    pass


@main.command()
@click.argument("bank_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("budget_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file (YAML)",
)
@click.option(
    "-f",
    "--filters",
    "filter_file",
    type=click.Path(path_type=Path),
    help="Path to filter file (JSON), defaults to filter.json next to the executable",
)
@click.option(
    "--date-range", type=click.IntRange(min=0), default=None, help="Override date window in days"
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
def reconcile(
    bank_file: Path,
    budget_file: Path,
    config: Optional[Path],
    filter_file: Optional[Path],
    date_range: Optional[int],
    verbose: bool,
):
    """
    Compare a bank statement to budget entries.

    BANK_FILE: Path to the bank statement CSV export
    BUDGET_FILE: Path to the budget app CSV export
    """
    try:
        recon_config = load_config(config)
        _setup_logging(recon_config, verbose)

        logging.getLogger(__name__).info(
            f"Comparing bank statement {bank_file} to budget entries {budget_file}"
        )

        if date_range is not None:
            recon_config.matching.date_match_range_days = date_range

        bank_transactions = BankStatementParser(recon_config.input.bank).parse_file(bank_file)
        budget_transactions = BudgetParser(recon_config.input.budget).parse_file(budget_file)

        filter_path = filter_file or recon_config.filter_path()
        filters = load_filters(filter_path)

        engine = ReconciliationEngine(recon_config.matching)
        result = engine.reconcile(bank_transactions, budget_transactions, filters)

        summary = build_summary(
            result,
            bank_filename=bank_file.name,
            budget_filename=budget_file.name,
            date_match_range_days=recon_config.matching.date_match_range_days,
        )
        ConsoleReporter(console, verbose=verbose).render(result, summary)

    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if verbose:
            console.print_exception()
        sys.exit(1)


@main.command("parse-bank")
@click.argument("bank_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-c", "--config", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def parse_bank(bank_file: Path, config: Optional[Path]):
    """
    Parse a bank statement and display its transactions.

    BANK_FILE: Path to the bank statement CSV export
    """
    try:
        recon_config = load_config(config)
        transactions = BankStatementParser(recon_config.input.bank).parse_file(bank_file)
    except ReconciliationError as e:
        console.print(f"[red]Error parsing file: {escape(str(e))}[/red]")
        sys.exit(1)

    _display_transactions(f"Bank Transactions: {bank_file.name}", transactions)


@main.command("parse-budget")
@click.argument("budget_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-c", "--config", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def parse_budget(budget_file: Path, config: Optional[Path]):
    """
    Parse a budget export and display its transactions.

    BUDGET_FILE: Path to the budget app CSV export
    """
    try:
        recon_config = load_config(config)
        transactions = BudgetParser(recon_config.input.budget).parse_file(budget_file)
    except ReconciliationError as e:
        console.print(f"[red]Error parsing file: {escape(str(e))}[/red]")
        sys.exit(1)

    _display_transactions(f"Budget Transactions: {budget_file.name}", transactions)


@main.command("init-config")
@click.option(
    "-o", "--output", type=click.Path(path_type=Path), default=Path("config.yaml")
)
def init_config(output: Path):
    """Generate a sample configuration file."""
    generate_default_config(output)
    console.print(f"[green]Configuration file generated: {escape(str(output))}[/green]")


def _setup_logging(config: ReconConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else level_from_name(config.logging.level)
    log_file = Path(config.logging.file) if config.logging.file else None
    setup_logging(level, log_file=log_file, log_format=config.logging.format)


def _display_transactions(title: str, transactions: list[Transaction]) -> None:
    table = Table(title=escape(title))
    table.add_column("Date")
    table.add_column("Description")
    table.add_column("Details")
    table.add_column("Amount", justify="right")

    for txn in transactions[:PREVIEW_ROWS]:
        description = (
            txn.description[:40] + "..." if len(txn.description) > 40 else txn.description
        )
        table.add_row(
            txn.timestamp.isoformat(),
            escape(description),
            escape(txn.details) or "-",
            format_amount(txn.amount),
        )

    console.print(table)

    if len(transactions) > PREVIEW_ROWS:
        console.print(f"\n... and {len(transactions) - PREVIEW_ROWS} more transactions")

    console.print(f"\nTotal transactions: {len(transactions)}")


if __name__ == "__main__":
    main()
