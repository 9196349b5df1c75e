"""Parsers for bank statement and budget export files."""

from .bank_parser import BankStatementParser
from .budget_parser import BudgetParser
from .reader import read_rows
from .record import LedgerParser, parse_transaction

__all__ = [
    "BankStatementParser",
    "BudgetParser",
    "LedgerParser",
    "parse_transaction",
    "read_rows",
]
