"""Vault list search, filter and sort service."""

from contextlib import contextmanager
from typing import TYPE_CHECKING, Callable, Optional, Sequence, Union

from vaultfilter.domain.entities import (
    FilterState,
    ResultView,
    SortDirection,
    SortField,
    StatusFilter,
    Vault,
)
from vaultfilter.domain.filter_state import FilterStateStore
from vaultfilter.domain.persistence import FILTER_STORAGE_KEY, FilterStatePersistence
from vaultfilter.domain.results import ResultAssembler
from vaultfilter.utils.debounce import DEFAULT_DELAY_MS, Debouncer, Scheduler

if TYPE_CHECKING:
    from vaultfilter.database.base import SessionStorage

ChangeListener = Callable[[], None]


class VaultFilterService:
    """Service tying filter state, debounced search and persistence together.

    Text search uses the debounced query; status and sort changes apply
    immediately. Everything except the query is written to session storage
    on each change and read back when the service is created.
    """

    def __init__(
        self,
        vaults: Sequence[Vault] = (),
        storage: Optional["SessionStorage"] = None,
        debounce_ms: int = DEFAULT_DELAY_MS,
        scheduler: Optional[Scheduler] = None,
        storage_key: str = FILTER_STORAGE_KEY,
    ):
        """Initialize the service.

        Args:
            vaults: Vaults to search, owned by the caller
            storage: SessionStorage used for persistence; in-memory if omitted
            debounce_ms: Quiet period before a query change takes effect
            scheduler: Timer source for the debouncer
            storage_key: Key under which filter state is stored
        """
        if storage is None:
            from vaultfilter.database.memory import MemorySessionStorage

            storage = MemorySessionStorage()
        self._vaults = vaults
        self._listeners: list[ChangeListener] = []
        self._batch_depth = 0
        self._batch_dirty = False

        self.persistence = FilterStatePersistence(storage, key=storage_key)
        self._store = FilterStateStore(self.persistence.load())
        self._debouncer = Debouncer(
            self._store.state.query,
            delay_ms=debounce_ms,
            scheduler=scheduler,
            on_settle=lambda _query: self._notify(),
        )
        self._assembler = ResultAssembler()
        self._unsubscribers = [
            self.persistence.attach(self._store),
            self._store.subscribe(lambda _state: self._notify()),
        ]
        self._disposed = False

    @property
    def vaults(self) -> Sequence[Vault]:
        return self._vaults

    @property
    def settled_query(self) -> str:
        """The query currently applied to the results."""
        return self._debouncer.value

    @property
    def query_pending(self) -> bool:
        return self._debouncer.pending

    def get_state(self) -> FilterState:
        """Return the live filter state (query as typed)."""
        return self._store.state

    def get_result(self) -> ResultView:
        """Return the filtered, sorted vaults for the current inputs.

        Repeated calls with unchanged inputs return the same object.
        """
        settled = self._store.state.replace(query=self._debouncer.value)
        return self._assembler(self._vaults, settled)

    def set_vaults(self, vaults: Sequence[Vault]) -> None:
        """Replace the vault sequence being searched."""
        if vaults is self._vaults:
            return
        self._vaults = vaults
        self._notify()

    def set_query(self, query: str) -> None:
        self._store.set_query(query)
        self._debouncer.set(query)

    def set_status_filter(self, status_filter: Union[StatusFilter, str]) -> None:
        self._store.set_status_filter(status_filter)

    def set_sort_field(self, sort_field: Union[SortField, str]) -> None:
        """Select a sort field; re-selecting the current one flips the direction."""
        self._store.set_sort_field(sort_field)

    def set_sort_direction(self, sort_direction: Union[SortDirection, str]) -> None:
        self._store.set_sort_direction(sort_direction)

    def toggle_sort_direction(self) -> None:
        self._store.toggle_sort_direction()

    def reset(self) -> None:
        """Restore defaults, clearing the applied query without waiting."""
        with self._batched():
            self._store.reset()
            self._debouncer.settle_now("")

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a listener called whenever get_result() may have changed.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispose(self) -> None:
        """Cancel the pending search update and detach from storage and listeners."""
        if self._disposed:
            return
        self._disposed = True
        self._debouncer.dispose()
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self._listeners.clear()

    @contextmanager
    def _batched(self):
        self._batch_depth += 1
        try:
            yield
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._batch_dirty:
                self._batch_dirty = False
                self._notify()

    def _notify(self) -> None:
        if self._batch_depth:
            self._batch_dirty = True
            return
        for listener in list(self._listeners):
            listener()

    def __enter__(self) -> "VaultFilterService":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()
