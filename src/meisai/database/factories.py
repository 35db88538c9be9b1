"""Database factory functions for creating database instances."""

import logging
import os
from pathlib import Path
from typing import Optional

from meisai.database.sqlalchemy_db import SQLAlchemyDatabase

logger = logging.getLogger(__name__)

DB_PATH_ENV_VAR = "MEISAI_DB_PATH"
DEFAULT_DB_DIR = ".meisai"
DEFAULT_DB_FILE = "meisai.db"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Pick the SQLite file to use.

    An explicit path wins, then the MEISAI_DB_PATH environment variable, then
    ~/.meisai/meisai.db. The default directory is created on first use.
    """
    if database_path:
        return Path(database_path)

    from_env = os.environ.get(DB_PATH_ENV_VAR)
    if from_env:
        return Path(from_env)

    db_dir = Path.home() / DEFAULT_DB_DIR
    db_dir.mkdir(exist_ok=True)
    return db_dir / DEFAULT_DB_FILE


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file, see ``resolve_database_path``

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    path = resolve_database_path(database_path)
    logger.debug("Using database %s", path)
    return SQLAlchemyDatabase(f"sqlite:///{path}")
