"""Filter rules applied to bank transactions before matching."""

from pathlib import Path
from typing import Iterable, Sequence
import logging

from pydantic import TypeAdapter, ValidationError

from ..models.filter_rule import FilterRule
from ..models.transaction import Transaction
from ..utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_FILTER_LIST = TypeAdapter(list[FilterRule])


def is_filtered(transaction: Transaction, filters: Iterable[FilterRule]) -> bool:
    """Check whether any rule excludes the transaction."""
    return any(rule.matches(transaction.description, transaction.amount) for rule in filters)


def partition_filtered(
    transactions: Sequence[Transaction],
    filters: Sequence[FilterRule],
) -> tuple[list[Transaction], list[Transaction]]:
    """
    Split transactions by the filter rules.

    Returns:
        Tuple of (included, excluded) transactions, each in input order
    """
    included: list[Transaction] = []
    excluded: list[Transaction] = []

    for txn in transactions:
        if is_filtered(txn, filters):
            excluded.append(txn)
        else:
            included.append(txn)

    return included, excluded


def load_filters(filter_path: Path) -> list[FilterRule]:
    """
    Load filter rules from a JSON file.

    The file holds a list of objects with ``regex``, ``min`` and ``max`` keys,
    amounts in cents.

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed
    """
    try:
        content = filter_path.read_bytes()
    except OSError as e:
        raise ConfigurationError(f"failed to read filter file {filter_path}: {e}") from e

    try:
        filters = _FILTER_LIST.validate_json(content)
    except ValidationError as e:
        raise ConfigurationError(f"failed to parse filter file {filter_path}: {e}") from e

    logger.info(f"Found {len(filters)} filters")
    for rule in filters:
        logger.debug(f"Filter: {rule}")

    return filters
