"""Domain model entities for securebank.

These are pure data classes independent of the on-disk layout. The binary
codec in ``securebank.database.codec`` converts them to and from fixed-size
slots.
"""

from dataclasses import dataclass, replace

LAST_NAME_CAPACITY = 14
FIRST_NAME_CAPACITY = 9

EMPTY_ACCOUNT_NUMBER = 0
NO_CREDENTIAL = 0


def bounded_text(value: str, capacity: int) -> str:
    """Truncate text so its UTF-8 encoding fits in ``capacity`` bytes.

    A multi-byte character cut in half by the limit is dropped entirely.
    """
    encoded = value.encode("utf-8")
    if len(encoded) <= capacity:
        return value
    return encoded[:capacity].decode("utf-8", errors="ignore")


@dataclass(frozen=True)
class AccountRecord:
    """Bank account record held in one fixed-size slot.

    Names are truncated to their slot capacity when the record is built, so
    every record in memory is exactly what the store would persist.
    """

    account_number: int
    last_name: str = ""
    first_name: str = ""
    balance: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "last_name", bounded_text(self.last_name, LAST_NAME_CAPACITY))
        object.__setattr__(
            self, "first_name", bounded_text(self.first_name, FIRST_NAME_CAPACITY)
        )
        object.__setattr__(self, "balance", float(self.balance))

    @classmethod
    def empty(cls) -> "AccountRecord":
        """Return the empty-slot sentinel."""
        return cls(account_number=EMPTY_ACCOUNT_NUMBER)

    @property
    def is_empty(self) -> bool:
        return self.account_number == EMPTY_ACCOUNT_NUMBER

    def occupies(self, account_number: int) -> bool:
        """True if this record is the live account stored in slot ``account_number``."""
        return not self.is_empty and self.account_number == account_number

    def with_balance(self, balance: float) -> "AccountRecord":
        return replace(self, balance=balance)
