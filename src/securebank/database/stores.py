"""Fixed-slot binary files backing the account and credential stores."""

from pathlib import Path
from typing import BinaryIO, Optional

from securebank.database.codec import (
    CREDENTIAL_SIZE,
    EMPTY_CREDENTIAL_SLOT,
    EMPTY_RECORD_SLOT,
    RECORD_SIZE,
    credential_from_bytes,
    credential_to_bytes,
    record_from_bytes,
    record_to_bytes,
)
from securebank.domain.entities import AccountRecord
from securebank.domain.errors import OutOfRangeError, StorageError, account_out_of_range
from securebank.logging import get_logger

logger = get_logger(__name__)


class SlotFile:
    """A file of ``capacity`` equally sized slots addressed by account number.

    Slot ``n`` (1-based) lives at byte offset ``(n - 1) * slot_size``. The
    file is opened once by ``initialize()`` and held until ``close()``.
    """

    def __init__(self, path: Path, slot_size: int, capacity: int, blank_slot: bytes):
        """Initialize slot file.

        Args:
            path: Backing file path
            slot_size: Size of one slot in bytes
            capacity: Number of slots (highest valid account number)
            blank_slot: Bytes written into slots added during initialization
        """
        if len(blank_slot) != slot_size:
            raise ValueError("blank_slot must be exactly one slot long")
        self.path = Path(path)
        self.slot_size = slot_size
        self.capacity = capacity
        self.blank_slot = blank_slot
        self._file: Optional[BinaryIO] = None

    @property
    def expected_size(self) -> int:
        return self.capacity * self.slot_size

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def initialize(self) -> None:
        """Open the file, creating it if absent, and extend it to full capacity.

        Raises:
            StorageError: If the file cannot be opened or an extension write fails.
                Slots already appended stay in place; they are blank, so a later
                call simply continues the extension.
        """
        if self._file is None:
            try:
                try:
                    self._file = open(self.path, "r+b", buffering=0)
                except FileNotFoundError:
                    logger.debug("Creating %s", self.path)
                    self._file = open(self.path, "w+b", buffering=0)
            except OSError as e:
                raise StorageError(f"Could not open {self.path}: {e}") from e

        try:
            current_size = self._file.seek(0, 2)
            if current_size < self.expected_size:
                logger.debug(
                    "Extending %s from %d to %d bytes",
                    self.path,
                    current_size,
                    self.expected_size,
                )
                while current_size < self.expected_size:
                    self._file.write(self.blank_slot)
                    current_size += self.slot_size
                self._file.flush()
            self._file.seek(0)
        except OSError as e:
            raise StorageError(f"Could not initialize {self.path}: {e}") from e

    def close(self) -> None:
        if self._file is not None:
            try:
                self._file.close()
            finally:
                self._file = None

    def _require_file(self) -> BinaryIO:
        if self._file is None:
            raise StorageError(f"{self.path} is not open")
        return self._file

    def offset_of(self, account_number: int) -> int:
        """Return the byte offset of a slot.

        Raises:
            OutOfRangeError: If account_number is outside [1, capacity]
        """
        if not 1 <= account_number <= self.capacity:
            raise OutOfRangeError(account_out_of_range(account_number, self.capacity))
        return (account_number - 1) * self.slot_size

    def read_slot(self, account_number: int) -> bytes:
        offset = self.offset_of(account_number)
        handle = self._require_file()
        try:
            handle.seek(offset)
            data = handle.read(self.slot_size)
        except OSError as e:
            raise StorageError(f"Could not read slot {account_number} of {self.path}: {e}") from e
        if len(data) != self.slot_size:
            raise StorageError(
                f"Short read on slot {account_number} of {self.path}: "
                f"got {len(data)} of {self.slot_size} bytes"
            )
        return data

    def write_slot(self, account_number: int, data: bytes) -> None:
        """Write one full slot and flush it.

        Raises:
            StorageError: If the seek, write or flush fails; the slot must then
                be treated as not persisted.
        """
        if len(data) != self.slot_size:
            raise ValueError(f"Slot data must be {self.slot_size} bytes, got {len(data)}")
        offset = self.offset_of(account_number)
        handle = self._require_file()
        try:
            handle.seek(offset)
            written = handle.write(data)
            handle.flush()
        except OSError as e:
            raise StorageError(
                f"Could not write slot {account_number} of {self.path}: {e}"
            ) from e
        if written != self.slot_size:
            raise StorageError(f"Short write on slot {account_number} of {self.path}")


class RecordStore(SlotFile):
    """Account records, one 40-byte slot per account number."""

    def __init__(self, path: Path, capacity: int):
        super().__init__(path, RECORD_SIZE, capacity, EMPTY_RECORD_SLOT)

    def read(self, account_number: int) -> AccountRecord:
        """Read the record in slot ``account_number``.

        The record is returned as stored: an empty or mismatched account number
        is for the caller to interpret.
        """
        return record_from_bytes(self.read_slot(account_number))

    def write(self, account_number: int, record: AccountRecord) -> None:
        self.write_slot(account_number, record_to_bytes(record))


class CredentialStore(SlotFile):
    """PIN hashes, one 4-byte slot per account number, aligned with RecordStore."""

    def __init__(self, path: Path, capacity: int):
        super().__init__(path, CREDENTIAL_SIZE, capacity, EMPTY_CREDENTIAL_SLOT)

    def read(self, account_number: int) -> int:
        return credential_from_bytes(self.read_slot(account_number))

    def write(self, account_number: int, pin_hash: int) -> None:
        self.write_slot(account_number, credential_to_bytes(pin_hash))
