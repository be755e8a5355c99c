"""Append-only audit trail of account activity."""

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Callable

from securebank.logging import get_logger

logger = get_logger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class AuditAction(str, Enum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    TRANSFER = "TRANSFER"
    PIN_CHANGE = "PIN_CHANGE"
    AUTH_FAIL = "AUTH_FAIL"


def format_audit_line(timestamp: datetime, action: AuditAction, details: str) -> str:
    """Return one audit line: ``[YYYY-MM-DD HH:MM:SS] ACTION: details``."""
    return f"[{timestamp.strftime(TIMESTAMP_FORMAT)}] {action.value}: {details}\n"


class AuditLog:
    """Write-only audit sink.

    The file is opened, appended to and closed for every event. Losing an
    event is not fatal: write failures are logged and never reach the caller.
    """

    def __init__(self, path: Path, clock: Callable[[], datetime] = datetime.now):
        self.path = Path(path)
        self.clock = clock

    def record(self, action: AuditAction, details: str) -> None:
        line = format_audit_line(self.clock(), action, details)
        try:
            with open(self.path, "a", encoding="utf-8") as audit_file:
                audit_file.write(line)
        except OSError as e:
            logger.warning("Could not write %s audit event to %s: %s", action.value, self.path, e)
