"""Reading delimited ledger files into raw rows."""

from pathlib import Path
import csv
import logging

from ..utils.exceptions import LedgerReadError

logger = logging.getLogger(__name__)


def read_rows(file_path: Path, encoding: str = "utf-8", delimiter: str = ",") -> list[list[str]]:
    """
    Read every row of a delimited file.

    Rows may have different numbers of fields; each row is returned exactly
    as the file holds it.

    Args:
        file_path: Path to the file
        encoding: Text encoding of the file
        delimiter: Field delimiter

    Returns:
        List of rows, each a list of field strings

    Raises:
        LedgerReadError: If the file cannot be opened, decoded or tokenized
    """
    try:
        with open(file_path, "r", encoding=encoding, newline="") as f:
            rows = list(csv.reader(f, delimiter=delimiter))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise LedgerReadError(f"Failed to read {file_path}: {e}") from e

    logger.debug(f"Read {len(rows)} rows from {file_path}")
    return rows
