"""Database implementation over two fixed-slot binary files."""

from pathlib import Path

from securebank.database.base import Database
from securebank.database.stores import CredentialStore, RecordStore
from securebank.domain.entities import AccountRecord, NO_CREDENTIAL
from securebank.logging import get_logger

logger = get_logger(__name__)


class BinaryFileDatabase(Database):
    """Account records and PIN hashes kept in two random-access files.

    Neither file is locked; only one process is expected to hold them.
    """

    def __init__(self, record_path: Path, credential_path: Path, capacity: int):
        """Initialize binary file database.

        Args:
            record_path: Path to the account record file
            credential_path: Path to the PIN hash file
            capacity: Number of account slots in each file
        """
        self.capacity = capacity
        self.records = RecordStore(record_path, capacity)
        self.credentials = CredentialStore(credential_path, capacity)

    def initialize(self) -> None:
        self.records.initialize()
        self.credentials.initialize()
        logger.debug(
            "Opened %s and %s with %d slots",
            self.records.path,
            self.credentials.path,
            self.capacity,
        )

    def close(self) -> None:
        try:
            self.records.close()
        finally:
            self.credentials.close()

    def read_record(self, account_number: int) -> AccountRecord:
        return self.records.read(account_number)

    def write_record(self, account_number: int, record: AccountRecord) -> None:
        self.records.write(account_number, record)

    def read_credential(self, account_number: int) -> int:
        return self.credentials.read(account_number)

    def write_credential(self, account_number: int, pin_hash: int) -> None:
        self.credentials.write(account_number, pin_hash)

    def create_account(self, record: AccountRecord, pin_hash: int) -> None:
        # Record first: a failure between the two writes leaves an account
        # with no PIN rather than a PIN with no account.
        self.records.write(record.account_number, record)
        self.credentials.write(record.account_number, pin_hash)

    def clear_account(self, account_number: int) -> None:
        self.records.write(account_number, AccountRecord.empty())
        self.credentials.write(account_number, NO_CREDENTIAL)
