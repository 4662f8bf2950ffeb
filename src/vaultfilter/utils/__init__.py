"""Utility functions for vaultfilter."""

from vaultfilter.utils.debounce import Debouncer
from vaultfilter.utils.vault_parser import parse_vault, parse_vaults, load_vaults_file

__all__ = ["Debouncer", "parse_vault", "parse_vaults", "load_vaults_file"]
