"""
Conversion of raw ledger rows into transactions.
Shared by the bank statement and budget export parsers.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Sequence
import logging

from ..config import ColumnMapping
from ..models.transaction import LedgerSource, Transaction
from ..utils.exceptions import RecordParseError
from ..utils.money import parse_cents
from .reader import read_rows

logger = logging.getLogger(__name__)

DATE_FORMAT = "%m/%d/%Y"


def parse_transaction(
    row: Sequence[str],
    columns: ColumnMapping,
    date_format: str = DATE_FORMAT,
    source: LedgerSource = LedgerSource.BANK,
    index: int = 0,
) -> Transaction:
    """
    Convert one ledger row into a transaction.

    Args:
        row: Ordered field values
        columns: Positions of timestamp, description, amount and details
        date_format: strptime format of the timestamp field
        source: Ledger the row belongs to
        index: Position to record on the transaction

    Returns:
        Parsed transaction

    Raises:
        RecordParseError: On a bad date, a non-numeric amount or a short row
    """
    wanted = [columns.timestamp, columns.description, columns.amount]
    if columns.details is not None:
        wanted.append(columns.details)

    if len(row) <= max(wanted):
        raise RecordParseError(
            f"row has {len(row)} fields, expected at least {max(wanted) + 1}: {list(row)}"
        )

    try:
        timestamp = datetime.strptime(row[columns.timestamp].strip(), date_format).date()
    except ValueError as e:
        raise RecordParseError(f"invalid timestamp: {e}, {list(row)}") from e

    try:
        amount = parse_cents(row[columns.amount])
    except ValueError as e:
        raise RecordParseError(f"invalid amount: {e}, {list(row)}") from e

    details = row[columns.details] if columns.details is not None else ""

    return Transaction(
        timestamp=timestamp,
        description=row[columns.description],
        details=details,
        amount=amount,
        source=source,
        index=index,
    )


class LedgerParser(ABC):
    """
    Base parser for a ledger export.

    Subclasses decide which rows hold transactions; this class turns those
    rows into transactions and drops the ones that fail to parse.
    """

    source: LedgerSource = LedgerSource.BANK

    def __init__(
        self,
        columns: ColumnMapping,
        date_format: str = DATE_FORMAT,
        encoding: str = "utf-8",
        delimiter: str = ",",
    ):
        self.columns = columns
        self.date_format = date_format
        self.encoding = encoding
        self.delimiter = delimiter

    def parse_file(self, file_path: Path) -> list[Transaction]:
        """
        Read and parse a ledger file.

        Raises:
            LedgerReadError: If the file cannot be read
            LedgerFormatError: If the file layout is not recognised
        """
        logger.info(f"Parsing {self.source.value} file: {file_path}")
        rows = read_rows(file_path, encoding=self.encoding, delimiter=self.delimiter)
        transactions = self.parse_rows(rows)
        logger.info(
            f"Extracted {len(transactions)} transactions from {self.source.value} file"
        )
        return transactions

    def parse_rows(self, rows: Sequence[Sequence[str]]) -> list[Transaction]:
        """Parse the transaction rows, skipping rows that fail to parse."""
        transactions: list[Transaction] = []

        for row_number, row in self._data_rows(rows):
            if not any(field.strip() for field in row):
                continue

            try:
                txn = parse_transaction(
                    row,
                    self.columns,
                    date_format=self.date_format,
                    source=self.source,
                    index=len(transactions),
                )
            except RecordParseError as e:
                logger.warning(f"Invalid record on row {row_number}, skipping: {e}")
                continue

            transactions.append(txn)

        return transactions

    @abstractmethod
    def _data_rows(self, rows: Sequence[Sequence[str]]):
        """Yield ``(row_number, row)`` for rows that hold transactions."""
        pass
