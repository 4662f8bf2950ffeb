"""Vault ordering."""

from functools import cmp_to_key
from operator import attrgetter
from typing import Iterable

from vaultfilter.domain.entities import SortDirection, SortField, Vault

SORT_KEYS = {
    SortField.ID: attrgetter("id"),
    SortField.AMOUNT: attrgetter("amount"),
    SortField.UNLOCK_HEIGHT: attrgetter("unlock_height"),
    SortField.CREATED_AT: attrgetter("created_at"),
}


def compare_vaults(a: Vault, b: Vault, field: SortField, direction: SortDirection) -> int:
    """Compare two vaults on a single field.

    Args:
        a: First vault
        b: Second vault
        field: Field to compare on; anything unrecognised compares by ID
        direction: DESC negates the comparison

    Returns:
        -1, 0 or 1
    """
    key = SORT_KEYS.get(field, SORT_KEYS[SortField.ID])
    diff = key(a) - key(b)
    result = (diff > 0) - (diff < 0)
    return -result if direction is SortDirection.DESC else result


def sort_vaults(
    vaults: Iterable[Vault], field: SortField, direction: SortDirection
) -> list[Vault]:
    """Return a new list of vaults ordered by ``field`` and ``direction``.

    The sort is stable, so vaults that compare equal keep their input order
    in both directions. The input is never modified.
    """
    return sorted(vaults, key=cmp_to_key(lambda a, b: compare_vaults(a, b, field, direction)))
