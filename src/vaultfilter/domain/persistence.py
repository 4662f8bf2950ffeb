"""Mirror filter state into session storage."""

import json
import logging
from typing import TYPE_CHECKING, Callable

from vaultfilter.domain.entities import (
    DEFAULT_FILTER_STATE,
    FilterState,
    SortDirection,
    SortField,
    StatusFilter,
)
from vaultfilter.domain.errors import StorageError
from vaultfilter.domain.filter_state import FilterStateStore, choice_or_default

if TYPE_CHECKING:
    from vaultfilter.database.base import SessionStorage

logger = logging.getLogger(__name__)

FILTER_STORAGE_KEY = "vault-filter-state"


def to_persisted(state: FilterState) -> dict[str, str]:
    """Project a FilterState onto the stored document (query is never stored)."""
    return {
        "statusFilter": state.status_filter.value,
        "sortField": state.sort_field.value,
        "sortDirection": state.sort_direction.value,
    }


def from_persisted(document: object) -> FilterState:
    """Merge a stored document over the defaults.

    Missing fields and values no longer recognised fall back to their
    defaults. Anything that is not a JSON object yields the defaults.
    """
    if not isinstance(document, dict):
        return DEFAULT_FILTER_STATE
    defaults = DEFAULT_FILTER_STATE
    return FilterState(
        status_filter=choice_or_default(
            StatusFilter, document.get("statusFilter"), defaults.status_filter
        ),
        sort_field=choice_or_default(SortField, document.get("sortField"), defaults.sort_field),
        sort_direction=choice_or_default(
            SortDirection, document.get("sortDirection"), defaults.sort_direction
        ),
    )


class FilterStatePersistence:
    """Loads and saves the persistable part of FilterState.

    Storage failures never propagate: a failed load yields the defaults and
    a failed save is dropped, since the in-memory state stays authoritative.
    """

    def __init__(self, storage: "SessionStorage", key: str = FILTER_STORAGE_KEY):
        """Initialize the adapter.

        Args:
            storage: Session-scoped key/value storage
            key: Storage key holding the serialized state
        """
        self.storage = storage
        self.key = key

    def load(self) -> FilterState:
        """Read the stored state, falling back to defaults on any failure."""
        try:
            raw = self.storage.get_item(self.key)
        except StorageError as e:
            logger.debug("Filter state not loaded from storage: %s", e)
            return DEFAULT_FILTER_STATE
        if raw is None:
            return DEFAULT_FILTER_STATE
        try:
            document = json.loads(raw)
        except ValueError as e:
            logger.debug("Ignoring malformed stored filter state: %s", e)
            return DEFAULT_FILTER_STATE
        return from_persisted(document)

    def save(self, state: FilterState) -> None:
        """Write the persistable projection of state."""
        payload = json.dumps(to_persisted(state), separators=(",", ":"))
        try:
            self.storage.set_item(self.key, payload)
        except StorageError as e:
            logger.debug("Filter state not saved to storage: %s", e)

    def attach(self, store: FilterStateStore) -> Callable[[], None]:
        """Save after every committed change of store.

        Returns:
            A function that detaches the adapter
        """
        return store.subscribe(self.save)
