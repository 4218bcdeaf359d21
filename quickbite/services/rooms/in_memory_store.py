"""In-memory document store."""
import copy
import uuid
from typing import Any, Dict

from quickbite.services.rooms.base import DocumentStore
from quickbite.services.rooms.exceptions import RoomNotFoundError


class InMemoryDocumentStore(DocumentStore):
    """Process-local store for development and tests.

    Documents are deep-copied in and out so callers never share state
    with the store, as with a remote service.
    """

    def __init__(self):
        self._documents: Dict[str, Dict[str, Any]] = {}

    async def create(self, document: Dict[str, Any]) -> str:
        """Store a new document and return its id."""
        document_id = uuid.uuid4().hex
        self._documents[document_id] = copy.deepcopy(document)
        return document_id

    async def read(self, document_id: str) -> Dict[str, Any]:
        """Fetch the current document."""
        if document_id not in self._documents:
            raise RoomNotFoundError(f"Room {document_id} not found", room_id=document_id, status_code=404)
        return copy.deepcopy(self._documents[document_id])

    async def write(self, document_id: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """Replace the whole document and return what was stored."""
        if document_id not in self._documents:
            raise RoomNotFoundError(f"Room {document_id} not found", room_id=document_id, status_code=404)
        self._documents[document_id] = copy.deepcopy(document)
        return copy.deepcopy(document)
