"""SQLAlchemy-backed session storage."""

import logging
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vaultfilter.database.base import SessionStorage
from vaultfilter.database.models import SessionItem, create_session_factory
from vaultfilter.database.mappers import session_item_to_domain
from vaultfilter.domain.entities import StoredItem
from vaultfilter.domain.errors import StorageError

logger = logging.getLogger(__name__)


class SQLAlchemySessionStorage(SessionStorage):
    """SQLAlchemy-based implementation of SessionStorage.

    Several sessions can share one database; each instance only sees the
    rows for its own ``session_id``.
    """

    def __init__(self, database_url: str, session_id: str = "default"):
        """Initialize SQLAlchemy session storage.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
            session_id: Identifier of the browsing session whose items are visible
        """
        self.database_url = database_url
        self.session_id = session_id
        try:
            self.session_factory = create_session_factory(database_url)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not open session storage: {e}") from e
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def _find(self, key: str) -> Optional[SessionItem]:
        session = self._get_session()
        return (
            session.query(SessionItem)
            .filter(SessionItem.session_id == self.session_id, SessionItem.key == key)
            .first()
        )

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def get_item(self, key: str) -> Optional[str]:
        try:
            item = self._find(key)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not read '{key}': {e}") from e
        return item.value if item is not None else None

    def set_item(self, key: str, value: str) -> None:
        session = self._get_session()
        try:
            item = self._find(key)
            if item is None:
                session.add(SessionItem(session_id=self.session_id, key=key, value=value))
            else:
                item.value = value
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(f"Could not write '{key}': {e}") from e

    def remove_item(self, key: str) -> None:
        session = self._get_session()
        try:
            item = self._find(key)
            if item is not None:
                session.delete(item)
                session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(f"Could not remove '{key}': {e}") from e

    def list_items(self) -> list[StoredItem]:
        session = self._get_session()
        try:
            items = (
                session.query(SessionItem)
                .filter(SessionItem.session_id == self.session_id)
                .order_by(SessionItem.key)
                .all()
            )
        except SQLAlchemyError as e:
            raise StorageError(f"Could not list session items: {e}") from e
        return [session_item_to_domain(item) for item in items]

    def clear(self) -> None:
        session = self._get_session()
        try:
            removed = (
                session.query(SessionItem)
                .filter(SessionItem.session_id == self.session_id)
                .delete()
            )
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(f"Could not clear session '{self.session_id}': {e}") from e
        logger.debug("Cleared %d item(s) from session %s", removed, self.session_id)
