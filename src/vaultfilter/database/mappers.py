"""Mapper functions to convert SQLAlchemy models into domain entities."""

from vaultfilter.domain import entities as domain
from vaultfilter.database.models import SessionItem as ORMSessionItem


def session_item_to_domain(orm_item: ORMSessionItem) -> domain.StoredItem:
    """Convert SQLAlchemy SessionItem model to domain StoredItem entity."""
    return domain.StoredItem(
        session_id=orm_item.session_id,
        key=orm_item.key,
        value=orm_item.value,
        updated_at=orm_item.updated_at,
    )
