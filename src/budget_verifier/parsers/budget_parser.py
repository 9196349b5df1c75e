"""Budget export parser."""

from typing import Iterator, Optional, Sequence

from ..config import BudgetInputConfig
from ..models.transaction import LedgerSource
from .record import LedgerParser


class BudgetParser(LedgerParser):
    """Parser for the budget app CSV export: a header row followed by entries."""

    source = LedgerSource.BUDGET

    def __init__(self, config: Optional[BudgetInputConfig] = None):
        config = config or BudgetInputConfig()
        super().__init__(
            columns=config.columns,
            date_format=config.date_format,
            encoding=config.encoding,
            delimiter=config.delimiter,
        )
        self.header_rows = config.header_rows

    def _data_rows(self, rows: Sequence[Sequence[str]]) -> Iterator[tuple[int, Sequence[str]]]:
        for i in range(self.header_rows, len(rows)):
            yield i + 1, rows[i]
