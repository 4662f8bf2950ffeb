"""Shared domain error messages and error types."""

from enum import Enum


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class StorageError(DomainError):
    """Session storage could not be read or written."""


class StorageUnavailableError(StorageError):
    """Session storage is disabled or cannot be reached."""


class StorageQuotaError(StorageError):
    """A write would exceed the storage quota."""


def unknown_choice(kind: str, value: object, enum_cls: type[Enum]) -> str:
    """Return message for a value that names no member of an enum."""
    choices = ", ".join(member.value for member in enum_cls)
    return f"Unknown {kind} '{value}' (expected one of: {choices})"


def storage_quota_exceeded(key: str, quota: int) -> str:
    """Return message when a write would exceed the storage quota."""
    return f"Cannot store '{key}': storage quota of {quota} characters exceeded"


def storage_unavailable() -> str:
    """Return message for disabled storage."""
    return "Session storage is unavailable"


def missing_vault_field(field_name: str) -> str:
    """Return message for a vault record missing a required field."""
    return f"Vault record is missing required field '{field_name}'"
