"""In-process session storage."""

from typing import Optional

from vaultfilter.database.base import SessionStorage
from vaultfilter.domain.entities import StoredItem
from vaultfilter.domain.errors import (
    StorageQuotaError,
    StorageUnavailableError,
    storage_quota_exceeded,
    storage_unavailable,
)


class MemorySessionStorage(SessionStorage):
    """Dict-backed storage that lives as long as the process.

    ``quota`` caps the total number of characters held across all values,
    and ``available=False`` makes every operation fail, mirroring a browser
    with storage disabled.
    """

    def __init__(
        self,
        session_id: str = "default",
        quota: Optional[int] = None,
        available: bool = True,
    ):
        self.session_id = session_id
        self.quota = quota
        self.available = available
        self._items: dict[str, str] = {}

    def _check_available(self) -> None:
        if not self.available:
            raise StorageUnavailableError(storage_unavailable())

    def connect(self) -> None:
        self._check_available()

    def disconnect(self) -> None:
        pass

    def initialize_schema(self) -> None:
        pass

    def get_item(self, key: str) -> Optional[str]:
        self._check_available()
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._check_available()
        if self.quota is not None:
            used = sum(len(v) for k, v in self._items.items() if k != key)
            if used + len(value) > self.quota:
                raise StorageQuotaError(storage_quota_exceeded(key, self.quota))
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._check_available()
        self._items.pop(key, None)

    def list_items(self) -> list[StoredItem]:
        self._check_available()
        return [
            StoredItem(session_id=self.session_id, key=key, value=self._items[key])
            for key in sorted(self._items)
        ]

    def clear(self) -> None:
        self._check_available()
        self._items.clear()
