"""Domain layer for vaultfilter application."""

from vaultfilter.domain.vault_filter import VaultFilterService
from vaultfilter.domain.filter_state import FilterStateStore
from vaultfilter.domain.persistence import FilterStatePersistence
from vaultfilter.domain.results import ResultAssembler, assemble_result

__all__ = [
    "VaultFilterService",
    "FilterStateStore",
    "FilterStatePersistence",
    "ResultAssembler",
    "assemble_result",
]
