"""Tests for filter state persistence."""

import json
import pytest

from vaultfilter.database.memory import MemorySessionStorage
from vaultfilter.domain.entities import (
    DEFAULT_FILTER_STATE,
    FilterState,
    SortDirection,
    SortField,
    StatusFilter,
)
from vaultfilter.domain.filter_state import FilterStateStore
from vaultfilter.domain.persistence import (
    FILTER_STORAGE_KEY,
    FilterStatePersistence,
    from_persisted,
    to_persisted,
)


class TestProjection:
    """Tests for the stored document shape."""

    def test_to_persisted_excludes_query(self):
        state = FilterState(
            query="secret",
            status_filter=StatusFilter.LOCKED,
            sort_field=SortField.UNLOCK_HEIGHT,
            sort_direction=SortDirection.DESC,
        )
        assert to_persisted(state) == {
            "statusFilter": "locked",
            "sortField": "unlockHeight",
            "sortDirection": "desc",
        }

    def test_from_persisted_merges_over_defaults(self):
        state = from_persisted({"sortField": "amount"})
        assert state == FilterState(sort_field=SortField.AMOUNT)

    def test_from_persisted_ignores_stored_query(self):
        assert from_persisted({"query": "old", "searchQuery": "old"}).query == ""

    def test_unknown_values_fall_back_per_field(self):
        """Test stale enum values from an older schema fall back to defaults."""
        state = from_persisted(
            {"statusFilter": "active", "sortField": "creator", "sortDirection": "desc"}
        )
        assert state.status_filter is StatusFilter.ALL
        assert state.sort_field is SortField.ID
        assert state.sort_direction is SortDirection.DESC

    @pytest.mark.parametrize("document", [None, [], "locked", 42])
    def test_non_object_document_yields_defaults(self, document):
        assert from_persisted(document) == DEFAULT_FILTER_STATE


class TestFilterStatePersistence:
    """Tests for FilterStatePersistence."""

    def test_missing_key_yields_defaults(self, memory_storage):
        assert FilterStatePersistence(memory_storage).load() == DEFAULT_FILTER_STATE

    def test_malformed_json_yields_defaults(self, memory_storage):
        memory_storage.set_item(FILTER_STORAGE_KEY, "not json")
        assert FilterStatePersistence(memory_storage).load() == DEFAULT_FILTER_STATE

    def test_unavailable_storage_yields_defaults(self):
        storage = MemorySessionStorage(available=False)
        assert FilterStatePersistence(storage).load() == DEFAULT_FILTER_STATE

    def test_save_writes_compact_json(self, memory_storage):
        persistence = FilterStatePersistence(memory_storage)
        persistence.save(FilterState(query="foo", status_filter=StatusFilter.WITHDRAWN))
        raw = memory_storage.get_item(FILTER_STORAGE_KEY)
        assert raw == '{"statusFilter":"withdrawn","sortField":"id","sortDirection":"asc"}'
        assert "foo" not in raw

    def test_save_swallows_quota_errors(self):
        storage = MemorySessionStorage(quota=10)
        FilterStatePersistence(storage).save(DEFAULT_FILTER_STATE)
        assert storage.get_item(FILTER_STORAGE_KEY) is None

    def test_save_swallows_unavailable_storage(self):
        FilterStatePersistence(MemorySessionStorage(available=False)).save(DEFAULT_FILTER_STATE)

    def test_custom_key(self, memory_storage):
        persistence = FilterStatePersistence(memory_storage, key="other")
        persistence.save(FilterState(sort_field=SortField.CREATED_AT))
        assert json.loads(memory_storage.get_item("other"))["sortField"] == "createdAt"
        assert memory_storage.get_item(FILTER_STORAGE_KEY) is None

    def test_attach_saves_on_every_change(self, memory_storage):
        store = FilterStateStore()
        persistence = FilterStatePersistence(memory_storage)
        detach = persistence.attach(store)
        store.set_status_filter("unlocked")
        assert persistence.load().status_filter is StatusFilter.UNLOCKED
        store.set_sort_field("amount")
        assert persistence.load().sort_field is SortField.AMOUNT
        detach()
        store.reset()
        assert persistence.load().sort_field is SortField.AMOUNT

    def test_round_trip_through_sqlite(self, temp_storage):
        persistence = FilterStatePersistence(temp_storage)
        persistence.save(FilterState(status_filter=StatusFilter.LOCKED))
        assert persistence.load() == FilterState(status_filter=StatusFilter.LOCKED)
