"""
Bank statement parser.
Bank exports start with a variable preamble that precedes the real header.
"""

from typing import Iterator, Optional, Sequence
import logging

from ..config import BankInputConfig
from ..models.transaction import LedgerSource
from ..utils.exceptions import LedgerFormatError
from .record import LedgerParser

logger = logging.getLogger(__name__)


class BankStatementParser(LedgerParser):
    """
    Parser for bank statement CSV exports.

    Transactions start after the row whose leading fields are the header
    labels ("Date", "Description", "Amount") plus a sub-header row.
    """

    source = LedgerSource.BANK

    def __init__(self, config: Optional[BankInputConfig] = None):
        config = config or BankInputConfig()
        super().__init__(
            columns=config.columns,
            date_format=config.date_format,
            encoding=config.encoding,
            delimiter=config.delimiter,
        )
        self.header_labels = list(config.header_labels)
        self.rows_after_header = config.rows_after_header

    def find_start(self, rows: Sequence[Sequence[str]]) -> int:
        """
        Locate the first transaction row.

        Returns:
            Index of the first row after the header and sub-header

        Raises:
            LedgerFormatError: If no header row exists
        """
        width = len(self.header_labels)
        for i, row in enumerate(rows):
            if len(row) >= width and list(row[:width]) == self.header_labels:
                logger.debug(f"Found bank statement header on row {i + 1}")
                return i + 1 + self.rows_after_header

        raise LedgerFormatError(
            "failed to find start of useful records: no row begins with "
            + ", ".join(self.header_labels)
        )

    def _data_rows(self, rows: Sequence[Sequence[str]]) -> Iterator[tuple[int, Sequence[str]]]:
        start = self.find_start(rows)
        for i in range(start, len(rows)):
            yield i + 1, rows[i]
