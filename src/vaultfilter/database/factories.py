"""Storage factory functions for creating session storage instances."""

import os
from pathlib import Path
from typing import Optional

from vaultfilter.database.sqlalchemy_db import SQLAlchemySessionStorage
from vaultfilter.domain.errors import StorageError

DEFAULT_SESSION_ID = "default"


def create_sqlite_storage(
    database_path: Optional[str] = None, session_id: Optional[str] = None
) -> SQLAlchemySessionStorage:
    """Create SQLite-backed session storage.

    Args:
        database_path: Path to SQLite database file. If None, checks VAULTFILTER_DB_PATH
            environment variable, then defaults to ~/.vaultfilter/vaultfilter.db
        session_id: Session identifier. If None, checks VAULTFILTER_SESSION
            environment variable, then defaults to "default"

    Returns:
        SQLAlchemySessionStorage instance configured for SQLite

    Raises:
        StorageError: If the default directory cannot be created or the
            database cannot be opened
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("VAULTFILTER_DB_PATH")

    if database_path is None:
        # Default to ~/.vaultfilter/vaultfilter.db
        home = Path.home()
        db_dir = home / ".vaultfilter"
        try:
            db_dir.mkdir(exist_ok=True)
        except OSError as e:
            raise StorageError(f"Could not create storage directory '{db_dir}': {e}") from e
        database_path = str(db_dir / "vaultfilter.db")

    if session_id is None:
        session_id = os.environ.get("VAULTFILTER_SESSION", DEFAULT_SESSION_ID)

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemySessionStorage(database_url, session_id=session_id)
