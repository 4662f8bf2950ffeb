"""Vault record parsing utilities."""

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

from vaultfilter.domain.entities import Vault
from vaultfilter.domain.errors import ValidationError, missing_vault_field

# Accepted spellings for each field, snake_case first
FIELD_ALIASES = {
    "id": ("id", "vault_id", "vaultId"),
    "amount": ("amount",),
    "unlock_height": ("unlock_height", "unlockHeight"),
    "created_at": ("created_at", "createdAt"),
    "is_withdrawn": ("is_withdrawn", "isWithdrawn"),
    "current_block_height": ("current_block_height", "currentBlockHeight"),
    "label": ("label", "nickname"),
}


def _lookup(record: Mapping[str, Any], field_name: str) -> Any:
    for alias in FIELD_ALIASES[field_name]:
        if alias in record:
            return record[alias]
    return None


def _parse_int(value: Any, field_name: str) -> int:
    if value is None:
        raise ValidationError(missing_vault_field(field_name))
    if isinstance(value, bool):
        raise ValidationError(f"Field '{field_name}' must be an integer, got {value!r}")
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"Field '{field_name}' must be an integer, got {value!r}") from None
    if not number.is_finite() or number != number.to_integral_value():
        raise ValidationError(f"Field '{field_name}' must be an integer, got {value!r}")
    return int(number)


def _parse_amount(value: Any) -> Decimal:
    if value is None:
        raise ValidationError(missing_vault_field("amount"))
    if isinstance(value, bool):
        raise ValidationError(f"Field 'amount' must be a number, got {value!r}")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"Field 'amount' must be a number, got {value!r}") from None
    if not amount.is_finite():
        raise ValidationError(f"Field 'amount' must be a number, got {value!r}")
    return amount


def _parse_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValidationError(f"Field '{field_name}' must be a boolean, got {value!r}")


def parse_vault(record: Mapping[str, Any]) -> Vault:
    """Build a Vault from a JSON-like mapping.

    Both snake_case keys and the camelCase wire form are accepted
    (e.g. ``unlock_height`` or ``unlockHeight``, ``label`` or ``nickname``).
    A missing ``isWithdrawn`` counts as not withdrawn.

    Args:
        record: Mapping of field names to values

    Returns:
        Vault entity

    Raises:
        ValidationError: If a required field is missing or has the wrong type
    """
    if not isinstance(record, Mapping):
        raise ValidationError(f"Vault record must be an object, got {type(record).__name__}")

    label: Optional[str] = _lookup(record, "label")
    if label is not None and not isinstance(label, str):
        label = str(label)

    return Vault(
        id=_parse_int(_lookup(record, "id"), "id"),
        amount=_parse_amount(_lookup(record, "amount")),
        unlock_height=_parse_int(_lookup(record, "unlock_height"), "unlock_height"),
        created_at=_parse_int(_lookup(record, "created_at"), "created_at"),
        is_withdrawn=_parse_bool(_lookup(record, "is_withdrawn"), "is_withdrawn"),
        current_block_height=_parse_int(
            _lookup(record, "current_block_height"), "current_block_height"
        ),
        label=label,
    )


def parse_vaults(records: Iterable[Mapping[str, Any]]) -> list[Vault]:
    """Parse several vault records, reporting the position of a bad one."""
    vaults = []
    for index, record in enumerate(records):
        try:
            vaults.append(parse_vault(record))
        except ValidationError as e:
            raise ValidationError(f"Vault #{index + 1}: {e}") from e
    return vaults


def load_vaults_file(path: Union[str, Path]) -> list[Vault]:
    """Load vaults from a JSON file.

    The file holds either an array of vault objects or an object with a
    ``vaults`` array.

    Raises:
        ValidationError: If the file is not valid JSON or a record is invalid
    """
    try:
        document = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValidationError(f"Could not parse vaults file '{path}': {e}") from e

    if isinstance(document, dict):
        document = document.get("vaults")
    if not isinstance(document, list):
        raise ValidationError(f"Vaults file '{path}' must contain a list of vaults")
    return parse_vaults(document)
