"""Filter state store with change notification."""

from enum import Enum
from typing import Callable, Optional, TypeVar, Union

from vaultfilter.domain.entities import (
    DEFAULT_FILTER_STATE,
    FilterState,
    SortDirection,
    SortField,
    StatusFilter,
)
from vaultfilter.domain.errors import ValidationError, unknown_choice

E = TypeVar("E", bound=Enum)

StateListener = Callable[[FilterState], None]


def parse_choice(enum_cls: type[E], value: Union[E, str], kind: str) -> E:
    """Convert an enum member or its string value into a member.

    Raises:
        ValidationError: If the value names no member
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(unknown_choice(kind, value, enum_cls)) from None


def choice_or_default(enum_cls: type[E], value: object, default: E) -> E:
    """Like parse_choice, but return ``default`` for unrecognised values."""
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return default


class FilterStateStore:
    """Holds the current FilterState and applies user transitions.

    Each transition replaces the whole state object in one step, then
    notifies subscribers with the new state. Transitions that produce an
    identical state do not notify.
    """

    def __init__(self, initial: Optional[FilterState] = None):
        """Initialize the store.

        Args:
            initial: Starting state, defaults to DEFAULT_FILTER_STATE
        """
        self._state = initial if initial is not None else DEFAULT_FILTER_STATE
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> FilterState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called after every committed change.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, new_state: FilterState) -> None:
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)

    def set_query(self, query: str) -> None:
        """Replace the query verbatim (no trimming)."""
        self._commit(self._state.replace(query=query))

    def set_status_filter(self, status_filter: Union[StatusFilter, str]) -> None:
        status_filter = parse_choice(StatusFilter, status_filter, "status filter")
        self._commit(self._state.replace(status_filter=status_filter))

    def set_sort_field(self, sort_field: Union[SortField, str]) -> None:
        """Select a sort field.

        Re-selecting the current field flips the direction; selecting a
        different field always starts ascending.
        """
        sort_field = parse_choice(SortField, sort_field, "sort field")
        if sort_field is self._state.sort_field:
            direction = self._state.sort_direction.flipped()
        else:
            direction = SortDirection.ASC
        self._commit(self._state.replace(sort_field=sort_field, sort_direction=direction))

    def set_sort_direction(self, sort_direction: Union[SortDirection, str]) -> None:
        sort_direction = parse_choice(SortDirection, sort_direction, "sort direction")
        self._commit(self._state.replace(sort_direction=sort_direction))

    def toggle_sort_direction(self) -> None:
        self._commit(self._state.replace(sort_direction=self._state.sort_direction.flipped()))

    def reset(self) -> None:
        """Restore every field to its default in a single transition."""
        self._commit(DEFAULT_FILTER_STATE)
