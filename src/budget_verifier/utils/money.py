"""Helpers for converting between currency text and integer cents."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("1")
HUNDRED = Decimal("100")


def parse_cents(text: str) -> int:
    """
    Convert decimal currency text into integer minor units.

    Thousands separators and a leading dollar sign are stripped. The value is
    parsed as a Decimal so "0.145" becomes 15 cents rather than whatever the
    nearest binary float rounds to.

    Args:
        text: Amount text such as "-1,234.56"

    Returns:
        Amount in cents

    Raises:
        ValueError: If the text is not a finite number
    """
    cleaned = text.strip().replace(",", "")
    if cleaned.startswith("-$"):
        cleaned = "-" + cleaned[2:]
    elif cleaned.startswith("$"):
        cleaned = cleaned[1:]

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"not a number: {text!r}") from None

    if not value.is_finite():
        raise ValueError(f"not a finite amount: {text!r}")

    return int((value * HUNDRED).quantize(CENT, rounding=ROUND_HALF_UP))


def format_amount(cents: int) -> str:
    """Render cents as a plain two-decimal string, e.g. -1234 -> "-12.34"."""
    sign = "-" if cents < 0 else ""
    whole, fraction = divmod(abs(cents), 100)
    return f"{sign}{whole}.{fraction:02d}"
