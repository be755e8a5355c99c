"""Database factory functions for creating database instances."""

from dataclasses import replace
from pathlib import Path
from typing import Optional

from securebank.config import BankConfig
from securebank.database.binary_db import BinaryFileDatabase
from securebank.domain.errors import StorageError


def create_file_database(
    config: Optional[BankConfig] = None, data_dir: Optional[str] = None
) -> BinaryFileDatabase:
    """Create a binary file database instance.

    Args:
        config: Store configuration. If None, it is read from the environment
            (SECUREBANK_DATA_DIR, SECUREBANK_CAPACITY).
        data_dir: Optional directory overriding config.data_dir

    Returns:
        BinaryFileDatabase instance (not yet initialized)
    """
    if config is None:
        config = BankConfig.from_env()

    if data_dir is not None:
        config = replace(config, data_dir=Path(data_dir))

    try:
        config.data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Could not create data directory {config.data_dir}: {e}") from e

    return BinaryFileDatabase(
        record_path=config.record_path,
        credential_path=config.credential_path,
        capacity=config.capacity,
    )
