"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation


def parse_amount(amount_str: str, allow_negative: bool = False) -> Decimal:
    """Parse an amount string into a Decimal.

    Accepts plain decimals such as "123.45" or "5000". Grouping separators
    and currency symbols are rejected; amounts are stored as entered.

    Args:
        amount_str: Amount string
        allow_negative: Accept amounts below zero

    Returns:
        Decimal amount

    Raises:
        ValueError: If the string is not a finite decimal, or is negative
            while ``allow_negative`` is False
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if amount < 0 and not allow_negative:
        raise ValueError(f"Amount must not be negative, got '{amount_str}'")

    return amount
