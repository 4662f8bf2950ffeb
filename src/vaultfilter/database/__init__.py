"""Session storage layer for vaultfilter."""

from vaultfilter.database.base import SessionStorage
from vaultfilter.database.memory import MemorySessionStorage
from vaultfilter.database.factories import create_sqlite_storage

__all__ = ["SessionStorage", "MemorySessionStorage", "create_sqlite_storage"]
