"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Iterator

from securebank.domain.entities import AccountRecord


class Database(ABC):
    """Abstract account database.

    Holds the account records and the PIN hashes as two index-aligned stores.
    Writes that must touch both stores go through the paired operations
    (``create_account``, ``clear_account``) so the stores cannot drift apart
    through caller discipline alone.
    """

    capacity: int

    @abstractmethod
    def initialize(self) -> None:
        """Open both stores, creating and pre-sizing them as needed."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release both stores."""
        pass

    def __enter__(self) -> "Database":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # Record operations
    @abstractmethod
    def read_record(self, account_number: int) -> AccountRecord:
        """Read the raw record in slot account_number."""
        pass

    @abstractmethod
    def write_record(self, account_number: int, record: AccountRecord) -> None:
        """Write and flush the record in slot account_number."""
        pass

    # Credential operations
    @abstractmethod
    def read_credential(self, account_number: int) -> int:
        """Read the PIN hash for account_number (0 = no PIN set)."""
        pass

    @abstractmethod
    def write_credential(self, account_number: int, pin_hash: int) -> None:
        """Write and flush the PIN hash for account_number."""
        pass

    # Paired operations
    @abstractmethod
    def create_account(self, record: AccountRecord, pin_hash: int) -> None:
        """Write a new record and its PIN hash into the same slot of both stores."""
        pass

    @abstractmethod
    def clear_account(self, account_number: int) -> None:
        """Reset a slot to the empty record and clear its PIN hash."""
        pass

    def iter_records(self) -> Iterator[AccountRecord]:
        """Yield occupied records in ascending account-number order."""
        for account_number in range(1, self.capacity + 1):
            record = self.read_record(account_number)
            if record.occupies(account_number):
                yield record
