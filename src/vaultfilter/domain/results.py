"""Derive the visible vault list from records and filter state."""

from typing import Optional, Sequence

from vaultfilter.domain.entities import FilterState, ResultView, Vault
from vaultfilter.domain.predicates import matches_query, matches_status
from vaultfilter.domain.sorting import sort_vaults


def assemble_result(vaults: Sequence[Vault], state: FilterState) -> ResultView:
    """Filter by text then status, sort, and count.

    ``state.query`` is expected to be the settled (debounced) query; the
    sort selection is used as given.

    Args:
        vaults: All vaults, never modified
        state: Filter state whose query has already settled

    Returns:
        ResultView for the state
    """
    matched = [v for v in vaults if matches_query(v, state.query)]
    matched = [v for v in matched if matches_status(v, state.status_filter)]
    ordered = sort_vaults(matched, state.sort_field, state.sort_direction)
    return ResultView(
        vaults=tuple(ordered),
        total_count=len(vaults),
        match_count=len(ordered),
        is_filtered=state.has_active_filters,
    )


class ResultAssembler:
    """Memoized assemble_result.

    The last result is returned unchanged (same object) while the vault
    sequence is the same object and the state compares equal.
    """

    def __init__(self):
        self._vaults: Optional[Sequence[Vault]] = None
        self._state: Optional[FilterState] = None
        self._result: Optional[ResultView] = None

    def __call__(self, vaults: Sequence[Vault], state: FilterState) -> ResultView:
        if self._result is not None and vaults is self._vaults and state == self._state:
            return self._result
        self._result = assemble_result(vaults, state)
        self._vaults = vaults
        self._state = state
        return self._result
