"""Fixed-width rendering of account records."""

from pathlib import Path
from typing import Iterable

from securebank.domain.entities import AccountRecord
from securebank.domain.errors import StorageError


def format_header() -> str:
    return f"{'Acct':<6}{'Last Name':<16}{'First Name':<11}{'Balance':>10}"


def format_record(record: AccountRecord) -> str:
    return (
        f"{record.account_number:<6}{record.last_name:<16}"
        f"{record.first_name:<11}{record.balance:>10.2f}"
    )


def format_accounts_table(records: Iterable[AccountRecord]) -> list[str]:
    """Render records as table lines, header first, in the order given."""
    return [format_header()] + [format_record(record) for record in records]


def write_accounts_report(records: Iterable[AccountRecord], path: Path) -> int:
    """Write the account table to a text file, replacing any previous report.

    Returns:
        Number of account rows written

    Raises:
        StorageError: If the file cannot be written
    """
    lines = format_accounts_table(records)
    try:
        with open(path, "w", encoding="utf-8") as report:
            for line in lines:
                report.write(line + "\n")
    except OSError as e:
        raise StorageError(f"Could not write {path}: {e}") from e
    return len(lines) - 1
