"""Binary slot layouts and conversions between slots and domain entities.

This layer isolates the byte layout, so the stores only deal with whole
slots and the domain only deals with entities.

Record slot (40 bytes, matching the C ``struct clientData`` on a
little-endian machine)::

    [00-03] uint32  account number (0 = empty slot)
    [04-18] char[15] last name, NUL padded
    [19-28] char[10] first name, NUL padded
    [29-31] padding
    [32-39] double  balance

Credential slot (4 bytes): uint32 PIN hash (0 = no PIN set).
"""

import struct

from securebank.domain.entities import AccountRecord, NO_CREDENTIAL

RECORD_LAYOUT = struct.Struct("<I15s10s3xd")
CREDENTIAL_LAYOUT = struct.Struct("<I")

RECORD_SIZE = RECORD_LAYOUT.size
CREDENTIAL_SIZE = CREDENTIAL_LAYOUT.size


def _decode_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def record_to_bytes(record: AccountRecord) -> bytes:
    """Pack an AccountRecord into one record slot."""
    return RECORD_LAYOUT.pack(
        record.account_number,
        record.last_name.encode("utf-8"),
        record.first_name.encode("utf-8"),
        record.balance,
    )


def record_from_bytes(data: bytes) -> AccountRecord:
    """Unpack one record slot into an AccountRecord."""
    account_number, last_name, first_name, balance = RECORD_LAYOUT.unpack(data)
    return AccountRecord(
        account_number=account_number,
        last_name=_decode_text(last_name),
        first_name=_decode_text(first_name),
        balance=balance,
    )


def credential_to_bytes(pin_hash: int) -> bytes:
    """Pack a PIN hash into one credential slot."""
    return CREDENTIAL_LAYOUT.pack(pin_hash & 0xFFFFFFFF)


def credential_from_bytes(data: bytes) -> int:
    """Unpack one credential slot."""
    (pin_hash,) = CREDENTIAL_LAYOUT.unpack(data)
    return pin_hash


EMPTY_RECORD_SLOT = record_to_bytes(AccountRecord.empty())
EMPTY_CREDENTIAL_SLOT = credential_to_bytes(NO_CREDENTIAL)
