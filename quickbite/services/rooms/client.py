"""Cloud room client.

A room is one JSON document `{menu, orders}` in a dumb document store.
There is no server-side concurrency control: every update reads the
whole document, changes it in memory and writes the whole document back.
"""
import asyncio
import logging
from typing import AsyncIterator, Iterable, List, Optional

from pydantic import ValidationError

from quickbite.core.config import settings
from quickbite.services.codec.models import MenuItem, Order, Room
from quickbite.services.rooms.base import DocumentStore
from quickbite.services.rooms.exceptions import RoomDocumentError, RoomSyncError

logger = logging.getLogger(__name__)


def orders_changed(previous: Optional[List[Order]], current: List[Order]) -> bool:
    """Structural comparison of two order lists."""
    if previous is None:
        return True
    return [o.to_document() for o in previous] != [o.to_document() for o in current]


class RoomClient:
    """Create, read and append to cloud rooms."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def _load(self, room_id: str) -> Room:
        document = await self.store.read(room_id)
        try:
            return Room.model_validate(document)
        except ValidationError as e:
            raise RoomDocumentError(
                f"Room {room_id} is not a valid room document", room_id=room_id
            ) from e

    async def create_room(self, menu: Iterable[MenuItem]) -> str:
        """
        Create a room holding a menu and no orders.

        Returns:
            Room id assigned by the store

        Raises:
            RoomSyncError: If the store is unreachable or refuses the document.
                Callers fall back to sharing a menu token.
        """
        room = Room(menu=list(menu), orders=[])
        room_id = await self.store.create(room.to_document())
        logger.info(f"[ROOM] Room created - room_id: {room_id}, {len(room.menu)} menu items")
        return room_id

    async def poll_room(self, room_id: str) -> Room:
        """Fetch the current room document."""
        room = await self._load(room_id)
        logger.debug(f"[ROOM] Room polled - room_id: {room_id}, {len(room.orders)} orders")
        return room

    async def submit_order(self, room_id: str, order: Order) -> Room:
        """
        Append an order to a room.

        Submitting an order whose (empName, timestamp) is already in the
        room is a no-op and returns the document unchanged.

        The read and the write are not atomic. Two different orders
        submitted concurrently can both read the same document, and the
        later write then drops the earlier order (lost update). This is
        an accepted limitation of the plain document store; the host
        still receives every order through the manual-token path.

        Raises:
            RoomSyncError: If reading or writing the room fails
        """
        room = await self._load(room_id)
        if room.has_order(order):
            logger.info(
                f"[ROOM] Duplicate order skipped - room_id: {room_id}, "
                f"emp_name: {order.emp_name}, timestamp: {order.timestamp}"
            )
            return room

        room.orders.append(order)
        stored = await self.store.write(room_id, room.to_document())
        logger.info(
            f"[ROOM] Order submitted - room_id: {room_id}, "
            f"emp_name: {order.emp_name}, {len(room.orders)} orders in room"
        )
        try:
            return Room.model_validate(stored)
        except ValidationError:
            logger.warning(f"[ROOM] Store echoed an invalid document - room_id: {room_id}")
            return room

    async def watch(
        self,
        room_id: str,
        interval: Optional[float] = None,
        last_seen: Optional[List[Order]] = None,
    ) -> AsyncIterator[Room]:
        """
        Poll a room on a fixed interval, yielding it when its orders change.

        Polling stops when the consumer stops iterating. Failed polls are
        logged and retried on the next tick. The interval defaults to
        `settings.room_poll_interval`.
        """
        if interval is None:
            interval = settings.room_poll_interval
        while True:
            try:
                room = await self.poll_room(room_id)
            except RoomSyncError as e:
                logger.warning(
                    f"[ROOM] Poll failed - room_id: {room_id}, Error: {type(e).__name__}: {e.message}"
                )
            else:
                if orders_changed(last_seen, room.orders):
                    last_seen = room.orders
                    yield room
            await asyncio.sleep(interval)
