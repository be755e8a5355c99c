"""Database layer for securebank application."""

from securebank.database.base import Database
from securebank.database.factories import create_file_database

__all__ = ["Database", "create_file_database"]
