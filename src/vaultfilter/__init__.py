"""Search, filter and sort a list of savings vaults.

The engine lives in :mod:`vaultfilter.domain`; ``VaultFilterService`` and the
``main`` CLI entry point are importable from the package root.
"""

__version__ = "0.1.0"

__all__ = ["VaultFilterService", "main", "__version__"]


# Resolved on first access so importing the package stays free of click and SQLAlchemy
def __getattr__(name):
    if name == "VaultFilterService":
        from vaultfilter.domain.vault_filter import VaultFilterService
        return VaultFilterService
    if name == "main":
        from vaultfilter.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
