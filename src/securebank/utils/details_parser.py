"""Parsing of the "lastname firstname balance" line used when opening an account."""

from typing import NamedTuple

from securebank.domain.errors import ValidationError
from securebank.utils.amount_parser import parse_amount


class AccountDetails(NamedTuple):
    last_name: str
    first_name: str
    balance: float


def parse_details(line: str) -> AccountDetails:
    """Parse a customer details line.

    The line must hold exactly three whitespace-separated fields: last name,
    first name and opening balance. Names are taken as typed; truncation to
    the record's capacity happens when the record is built.

    Raises:
        ValidationError: If the field count is wrong or the balance is not a number
    """
    fields = (line or "").split()
    if len(fields) != 3:
        raise ValidationError(
            "Invalid customer details: expected 'lastname firstname balance'"
        )

    last_name, first_name, balance_str = fields
    try:
        balance = parse_amount(balance_str)
    except ValidationError:
        raise ValidationError(f"Invalid customer details: bad balance '{balance_str}'")

    return AccountDetails(last_name=last_name, first_name=first_name, balance=balance)
