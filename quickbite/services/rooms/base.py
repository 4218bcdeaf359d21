"""JSON document store interface."""
from abc import ABC, abstractmethod
from typing import Any, Dict


class DocumentStore(ABC):
    """Abstract base class for remote JSON document stores.

    Implementations raise RoomSyncError (or a subclass) on any failure.
    """

    @abstractmethod
    async def create(self, document: Dict[str, Any]) -> str:
        """Store a new document and return its id."""
        pass

    @abstractmethod
    async def read(self, document_id: str) -> Dict[str, Any]:
        """Fetch the current document."""
        pass

    @abstractmethod
    async def write(self, document_id: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """Replace the whole document and return what was stored."""
        pass
