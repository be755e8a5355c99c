"""Parsing of account numbers, PINs and other unsigned integers."""

from securebank.domain.errors import OutOfRangeError, ValidationError


def parse_unsigned(value: str) -> int:
    """Parse a string of decimal digits into a non-negative integer.

    Raises:
        ValidationError: If the string is empty or contains anything but digits
    """
    value = (value or "").strip()
    if not value or not value.isascii() or not value.isdigit():
        raise ValidationError(f"Invalid number '{value}'")
    return int(value)


def parse_unsigned_in_range(value: str, minimum: int, maximum: int) -> int:
    """Parse an unsigned integer and check it lies in [minimum, maximum].

    Raises:
        ValidationError: If the string is not a number
        OutOfRangeError: If the number is outside the range
    """
    number = parse_unsigned(value)
    if not minimum <= number <= maximum:
        raise OutOfRangeError(f"{number} is out of range ({minimum} - {maximum})")
    return number
