import json
import logging
from datetime import date

import pytest

from budget_verifier.models.transaction import LedgerSource, Transaction


@pytest.fixture(autouse=True)
def reset_app_logger():
    """CLI runs attach handlers to the app logger; drop them between tests."""
    yield
    logger = logging.getLogger("budget_verifier")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)


def _ledger(source, entries):
    transactions = []
    for i, entry in enumerate(entries):
        timestamp, amount = entry[0], entry[1]
        description = entry[2] if len(entry) > 2 else f"{source.value} item {i}"
        transactions.append(
            Transaction(
                timestamp=timestamp,
                description=description,
                amount=amount,
                details="" if source == LedgerSource.BANK else "note",
                source=source,
                index=i,
            )
        )
    return transactions


@pytest.fixture
def make_bank():
    """Build a bank ledger from (date, cents[, description]) tuples."""
    def _make(*entries):
        return _ledger(LedgerSource.BANK, entries)
    return _make


@pytest.fixture
def make_budget():
    """Build a budget ledger from (date, cents[, description]) tuples."""
    def _make(*entries):
        return _ledger(LedgerSource.BUDGET, entries)
    return _make


@pytest.fixture
def jan():
    return lambda day: date(2024, 1, day)


BANK_CSV = """Account Name : CHECKING,,,
Account Number : 1234,,,
Date Range : 01/01/2024-01/31/2024,,,
Date,Description,Amount,Running Bal.
,Beginning balance as of 01/01/2024,,"1,000.00"
01/10/2024,GROCERY STORE #12,-45.67,954.33
01/12/2024,ONLINE TRANSFER,"-1,200.00",-245.67
01/15/2024,COFFEE SHOP,-4.50,-250.17
not a date,BROKEN ROW,-1.00,-251.17
01/20/2024,PAYROLL DEPOSIT,"2,500.00","2,249.83"
"""

BUDGET_CSV = """Date,Account,Description,Details,Amount
01/08/2024,Checking,Groceries,weekly shop,-45.67
01/11/2024,Checking,Rent,january,"-1,200.00"
01/16/2024,Checking,Coffee,latte,-4.50
01/17/2024,Checking,Oops,,abc
"""


@pytest.fixture
def bank_csv(tmp_path):
    path = tmp_path / "bank.csv"
    path.write_text(BANK_CSV)
    return path


@pytest.fixture
def budget_csv(tmp_path):
    path = tmp_path / "budget.csv"
    path.write_text(BUDGET_CSV)
    return path


@pytest.fixture
def filter_json(tmp_path):
    path = tmp_path / "filter.json"
    path.write_text(json.dumps([{"regex": "^PAYROLL", "min": 0, "max": 1000000}]))
    return path
