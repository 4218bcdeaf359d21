"""Host callback submission.

A host can put a callback endpoint in the menu token's extra data
(`{"gas": url}`); participants then post each finished order to it,
typically a spreadsheet script that appends one row per order.
"""
import logging
from typing import Any, Optional

import httpx

from quickbite.services.codec.models import Order
from quickbite.services.rooms.exceptions import RoomSyncError

logger = logging.getLogger(__name__)

CALLBACK_KEY = "gas"


def callback_url(extra: Any) -> Optional[str]:
    """Read the host callback endpoint from menu extra data."""
    if isinstance(extra, dict):
        url = extra.get(CALLBACK_KEY)
        if isinstance(url, str) and url.strip():
            return url.strip()
    return None


class CallbackNotifier:
    """Posts finished orders to a host callback endpoint."""

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ) -> None:
        self._client = http_client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = http_client is None

    async def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client:
            await self._client.aclose()

    async def submit(self, url: str, order: Order) -> None:
        """
        Post an order (canonical keys) to the callback endpoint.

        Raises:
            RoomSyncError: If the endpoint is unreachable or answers non-2xx
        """
        try:
            response = await self._client.post(
                url,
                json=order.to_document(),
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.error(
                f"[CALLBACK] Endpoint unreachable - Error: {type(e).__name__}: {str(e)}"
            )
            raise RoomSyncError(f"Callback endpoint unreachable: {str(e)}") from e

        if not response.is_success:
            logger.error(f"[CALLBACK] Endpoint rejected order - status: {response.status_code}")
            raise RoomSyncError(
                f"Callback endpoint returned {response.status_code}",
                status_code=response.status_code,
            )
        logger.info(f"[CALLBACK] Order delivered - emp_name: {order.emp_name}")
