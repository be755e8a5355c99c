"""Amount parsing utilities."""

import math

from securebank.domain.errors import ValidationError


def parse_amount(amount_str: str) -> float:
    """Parse an amount string into a float.

    Accepts plain decimal notation with an optional sign, e.g. "100",
    "-30.00", "+12.5". Amounts are kept at full float precision; no rounding
    to currency units is applied.

    Args:
        amount_str: Amount string

    Returns:
        Float amount

    Raises:
        ValidationError: If the string is empty, not a number, or not finite
    """
    if amount_str is None or not amount_str.strip():
        raise ValidationError("Invalid amount: empty input")

    amount_str = amount_str.strip()
    if "_" in amount_str:
        raise ValidationError(f"Invalid amount '{amount_str}'")

    try:
        amount = float(amount_str)
    except ValueError:
        raise ValidationError(f"Invalid amount '{amount_str}'")

    if not math.isfinite(amount):
        raise ValidationError(f"Invalid amount '{amount_str}'")
    return amount
