"""FastAPI dependencies."""
from typing import AsyncIterator

from quickbite.core.config import settings
from quickbite.services.rooms.client import RoomClient
from quickbite.services.rooms.http_store import HttpDocumentStore
from quickbite.services.sharing.callback import CallbackNotifier


async def get_room_client() -> AsyncIterator[RoomClient]:
    """Get room client backed by the configured document store."""
    store = HttpDocumentStore(settings.room_store_url, timeout=settings.room_store_timeout)
    try:
        yield RoomClient(store=store)
    finally:
        await store.close()


async def get_callback_notifier() -> AsyncIterator[CallbackNotifier]:
    """Get notifier for host callback endpoints."""
    notifier = CallbackNotifier(timeout=settings.callback_timeout)
    try:
        yield notifier
    finally:
        await notifier.close()
