"""HTTP JSON document store.

Speaks the plain blob-store contract:

    POST /      body: document   -> 2xx, id in Location header or body
    GET  /{id}                   -> 2xx, document
    PUT  /{id}  body: document   -> 2xx, stored document

Any non-2xx status is a hard failure of that call.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from quickbite.services.rooms.base import DocumentStore
from quickbite.services.rooms.exceptions import (
    RoomDocumentError,
    RoomNotFoundError,
    RoomSyncError,
)

logger = logging.getLogger(__name__)


class HttpDocumentStore(DocumentStore):
    """Document store backed by a remote JSON blob service."""

    def __init__(
        self,
        base_url: str,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ) -> None:
        """
        Initialize the store.

        Args:
            base_url: Collection URL documents are created under
            http_client: Optional HTTP client for dependency injection (testing)
            timeout: Seconds per request when we create our own client
        """
        self.base_url = base_url.rstrip("/")
        self._client = http_client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = http_client is None

    async def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client:
            await self._client.aclose()

    def _document_url(self, document_id: str) -> str:
        return f"{self.base_url}/{document_id}"

    async def _request(
        self,
        method: str,
        url: str,
        document_id: Optional[str] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        try:
            response = await self._client.request(
                method,
                url,
                json=json,
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.error(
                f"[ROOM] Store unreachable - {method} {url}, Error: {type(e).__name__}: {str(e)}"
            )
            raise RoomSyncError(
                f"Room store unreachable: {str(e)}", room_id=document_id
            ) from e

        if response.status_code == 404:
            raise RoomNotFoundError(
                f"Room {document_id} not found", room_id=document_id, status_code=404
            )
        if not response.is_success:
            logger.error(
                f"[ROOM] Store rejected request - {method} {url}, status: {response.status_code}"
            )
            raise RoomSyncError(
                f"Room store returned {response.status_code}",
                room_id=document_id,
                status_code=response.status_code,
            )
        return response

    def _json(self, response: httpx.Response, document_id: Optional[str]) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise RoomDocumentError(
                "Room store returned invalid JSON",
                room_id=document_id,
                status_code=response.status_code,
            ) from e

    async def create(self, document: Dict[str, Any]) -> str:
        """Store a new document and return its id."""
        response = await self._request("POST", self.base_url, json=document)

        location = response.headers.get("location")
        if location:
            return location.rstrip("/").rsplit("/", 1)[-1]
        blob_id = response.headers.get("x-jsonblob-id")
        if blob_id:
            return blob_id

        body = self._json(response, None) if response.content else None
        if isinstance(body, dict) and body.get("id"):
            return str(body["id"])
        raise RoomDocumentError(
            "Room store did not return a document id", status_code=response.status_code
        )

    async def read(self, document_id: str) -> Dict[str, Any]:
        """Fetch the current document."""
        response = await self._request("GET", self._document_url(document_id), document_id)
        body = self._json(response, document_id)
        if not isinstance(body, dict):
            raise RoomDocumentError(
                f"Room {document_id} is not a JSON object", room_id=document_id
            )
        return body

    async def write(self, document_id: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """Replace the whole document and return what was stored."""
        response = await self._request(
            "PUT", self._document_url(document_id), document_id, json=document
        )
        if not response.content:
            return document
        body = self._json(response, document_id)
        return body if isinstance(body, dict) else document
