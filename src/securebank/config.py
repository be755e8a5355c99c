"""Configuration management for securebank."""

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_CAPACITY = 100
LOG_FORMATS = ("standard", "json")


def default_data_dir() -> Path:
    """Return ~/.securebank, the directory used when nothing else is configured."""
    return Path.home() / ".securebank"


@dataclass
class BankConfig:
    """Locations and limits of one account store."""

    data_dir: Path = field(default_factory=default_data_dir)
    capacity: int = DEFAULT_CAPACITY
    record_file: str = "credit.dat"
    credential_file: str = "pins.dat"
    audit_file: str = "transactions.log"
    export_file: str = "accounts.txt"
    max_pin_attempts: int = 3
    min_pin: int = 1
    max_pin: int = 9999
    log_level: str = "WARNING"
    log_format: str = "standard"

    def __post_init__(self):
        self.data_dir = Path(self.data_dir)
        if self.capacity < 1:
            raise ValueError(f"Capacity must be at least 1, got {self.capacity}")
        if self.max_pin_attempts < 1:
            raise ValueError(
                f"max_pin_attempts must be at least 1, got {self.max_pin_attempts}"
            )
        if not 0 < self.min_pin <= self.max_pin:
            raise ValueError(f"Invalid PIN range {self.min_pin} - {self.max_pin}")
        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"Unknown log format '{self.log_format}'")

    @property
    def record_path(self) -> Path:
        return self.data_dir / self.record_file

    @property
    def credential_path(self) -> Path:
        return self.data_dir / self.credential_file

    @property
    def audit_path(self) -> Path:
        return self.data_dir / self.audit_file

    @property
    def export_path(self) -> Path:
        return self.data_dir / self.export_file

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        data_dir = os.getenv("SECUREBANK_DATA_DIR")
        return cls(
            data_dir=Path(data_dir) if data_dir else default_data_dir(),
            capacity=int(os.getenv("SECUREBANK_CAPACITY", str(DEFAULT_CAPACITY))),
            log_level=os.getenv("SECUREBANK_LOG_LEVEL", "WARNING"),
            log_format=os.getenv("SECUREBANK_LOG_FORMAT", "standard"),
        )
