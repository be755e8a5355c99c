"""Utility functions for securebank."""

from securebank.utils.amount_parser import parse_amount
from securebank.utils.details_parser import AccountDetails, parse_details
from securebank.utils.number_parser import parse_unsigned, parse_unsigned_in_range

__all__ = [
    "parse_amount",
    "AccountDetails",
    "parse_details",
    "parse_unsigned",
    "parse_unsigned_in_range",
]
