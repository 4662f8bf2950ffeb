"""Domain model entities for vaultfilter.

These are pure data classes describing vaults and the search/filter/sort
state applied to a vault list. They carry no knowledge of how vaults are
fetched or how results are rendered.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class VaultStatus(str, Enum):
    """Derived lifecycle status of a vault."""

    LOCKED = "locked"
    UNLOCKED = "unlocked"
    WITHDRAWN = "withdrawn"


class StatusFilter(str, Enum):
    """Status category shown in the vault list ('all' applies no filter)."""

    ALL = "all"
    LOCKED = "locked"
    UNLOCKED = "unlocked"
    WITHDRAWN = "withdrawn"


class SortField(str, Enum):
    """Field the vault list is ordered by."""

    ID = "id"
    AMOUNT = "amount"
    UNLOCK_HEIGHT = "unlockHeight"
    CREATED_AT = "createdAt"


class SortDirection(str, Enum):
    """Ordering direction."""

    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        """Return the opposite direction."""
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class Vault:
    """Vault record as supplied by the data-fetching layer.

    Block heights are monotonic counters; ``current_block_height`` is the
    caller's notion of "now" for this record.
    """

    id: int
    amount: Decimal
    unlock_height: int
    created_at: int
    is_withdrawn: bool
    current_block_height: int
    label: Optional[str] = None


@dataclass(frozen=True)
class FilterState:
    """Complete search, filter and sort selection for the vault list.

    Every field has a default, so an instance is never partially populated.
    ``query`` holds raw user input and is never trimmed here.
    """

    query: str = ""
    status_filter: StatusFilter = StatusFilter.ALL
    sort_field: SortField = SortField.ID
    sort_direction: SortDirection = SortDirection.ASC

    def replace(self, **changes) -> "FilterState":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @property
    def has_active_filters(self) -> bool:
        """True when the query (after trimming) or status differs from defaults."""
        return self.query.strip() != "" or self.status_filter is not StatusFilter.ALL


DEFAULT_FILTER_STATE = FilterState()


@dataclass(frozen=True)
class ResultView:
    """Filtered and sorted vaults plus the counts a list header needs."""

    vaults: tuple[Vault, ...] = field(default_factory=tuple)
    total_count: int = 0
    match_count: int = 0
    is_filtered: bool = False

    @property
    def result_label(self) -> str:
        """Human-readable count, e.g. '3 of 5 vaults' or '5 vaults'."""
        noun = "vault" if self.total_count == 1 else "vaults"
        if self.is_filtered:
            return f"{self.match_count} of {self.total_count} {noun}"
        return f"{self.total_count} {noun}"


@dataclass(frozen=True)
class StoredItem:
    """A single key/value entry held in session storage."""

    session_id: str
    key: str
    value: str
    updated_at: Optional[datetime] = None
