"""Abstract session storage interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from vaultfilter.domain.entities import StoredItem


class SessionStorage(ABC):
    """Abstract key/value storage scoped to one browsing session.

    Values survive for the lifetime of the session and are removed when the
    session ends (``clear``). Implementations raise ``StorageError`` (or a
    subclass) when the backing store cannot be used.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the backing store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the backing store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Get the value stored under key, or None if absent."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any existing value."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key. Removing a missing key is not an error."""
        pass

    @abstractmethod
    def list_items(self) -> list[StoredItem]:
        """List all items stored in this session, ordered by key."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """End the session by removing every stored item."""
        pass
