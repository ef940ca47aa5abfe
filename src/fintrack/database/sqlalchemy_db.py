"""Generic SQLAlchemy key-value storage implementation."""

from typing import Optional
import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fintrack.database.base import Storage
from fintrack.database.models import StorageEntry, create_session_factory
from fintrack.domain.errors import StorageError, quota_exceeded

logger = structlog.get_logger(__name__)


class SQLAlchemyStorage(Storage):
    """SQLAlchemy-based implementation of the Storage interface."""

    def __init__(self, database_url: str, quota: Optional[int] = None):
        """Initialize SQLAlchemy storage.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
            quota: Optional maximum size in bytes of a single stored value
        """
        self.database_url = database_url
        self.quota = quota
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

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
        """Get the text stored under key."""
        session = self._get_session()
        try:
            entry = (
                session.query(StorageEntry)
                .populate_existing()
                .filter(StorageEntry.key == key)
                .first()
            )
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(f"Could not read '{key}': {e}") from e
        if entry is None:
            return None
        return entry.value

    def set_item(self, key: str, value: str) -> None:
        """Store text under key, replacing any previous value."""
        size = len(value.encode("utf-8"))
        if self.quota is not None and size > self.quota:
            raise StorageError(quota_exceeded(key, size, self.quota))

        session = self._get_session()
        try:
            entry = session.query(StorageEntry).filter(StorageEntry.key == key).first()
            if entry is None:
                session.add(StorageEntry(key=key, value=value))
            else:
                entry.value = value
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(f"Could not write '{key}': {e}") from e
        logger.debug("storage_write", key=key, size=size)
