"""Storage factory functions for creating storage instances."""

import os
from pathlib import Path
from typing import Optional

from fintrack.database.sqlalchemy_db import SQLAlchemyStorage


def create_sqlite_storage(
    database_path: Optional[str] = None, quota: Optional[int] = None
) -> SQLAlchemyStorage:
    """Create a SQLite-backed storage instance.

    Args:
        database_path: Path to SQLite database file. If None, checks FINTRACK_DB_PATH
            environment variable, then defaults to ~/.fintrack/fintrack.db
        quota: Maximum bytes per stored entry. If None, checks
            FINTRACK_STORAGE_QUOTA environment variable, then no limit.

    Returns:
        SQLAlchemyStorage instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("FINTRACK_DB_PATH")

    if database_path is None:
        # Default to ~/.fintrack/fintrack.db
        home = Path.home()
        db_dir = home / ".fintrack"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "fintrack.db")

    if quota is None:
        env_quota = os.environ.get("FINTRACK_STORAGE_QUOTA")
        if env_quota:
            quota = int(env_quota)

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyStorage(database_url, quota=quota)
