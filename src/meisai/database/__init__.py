"""Database layer for meisai application."""

from meisai.database.base import Database
from meisai.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
