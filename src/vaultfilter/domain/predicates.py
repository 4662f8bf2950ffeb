"""Vault filter predicates.

Each predicate is pure and takes ``(vault, criterion)``. Predicates compose
by logical AND, one per axis.
"""

from vaultfilter.domain.entities import StatusFilter, Vault, VaultStatus


def is_unlocked(vault: Vault) -> bool:
    """Return True when the vault's unlock height has been reached."""
    return vault.current_block_height >= vault.unlock_height


def derive_status(vault: Vault) -> VaultStatus:
    """Classify a vault as withdrawn, unlocked or locked.

    Withdrawn takes precedence regardless of block height.
    """
    if vault.is_withdrawn:
        return VaultStatus.WITHDRAWN
    if is_unlocked(vault):
        return VaultStatus.UNLOCKED
    return VaultStatus.LOCKED


def matches_query(vault: Vault, query: str) -> bool:
    """Case-insensitive substring match against the vault ID or label.

    An empty or whitespace-only query matches every vault.
    """
    needle = query.strip().lower()
    if not needle:
        return True
    if needle in str(vault.id):
        return True
    return vault.label is not None and needle in vault.label.lower()


def matches_status(vault: Vault, status_filter: StatusFilter) -> bool:
    """Return True when the vault's derived status satisfies the filter."""
    if status_filter is StatusFilter.ALL:
        return True
    return derive_status(vault).value == status_filter.value


def matches_all(vault: Vault, query: str, status_filter: StatusFilter) -> bool:
    """Return True when the vault passes both the text and status predicates."""
    return matches_query(vault, query) and matches_status(vault, status_filter)
