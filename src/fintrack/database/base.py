"""Abstract key-value storage interface."""

from abc import ABC, abstractmethod
from typing import Optional


class Storage(ABC):
    """Durable key-value storage holding serialized text entries."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the storage backend."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the storage backend."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Get the text stored under key, or None if absent.

        Raises:
            StorageError: If the backend cannot be read
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store text under key, replacing any previous value.

        Raises:
            StorageError: If the write fails (e.g., quota exceeded)
        """
        pass
