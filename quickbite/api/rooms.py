"""Cloud room endpoints."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from quickbite.api.errors import ROOM_NOT_FOUND_DETAIL, SYNC_FAILED_DETAIL
from quickbite.api.menu import host_menu
from quickbite.core.dependencies import get_room_client
from quickbite.services.codec.models import MenuItem, Order, Room
from quickbite.services.rooms.client import RoomClient
from quickbite.services.rooms.exceptions import RoomNotFoundError, RoomSyncError
from quickbite.services.sharing.links import ManualInput, classify_manual_input

router = APIRouter()
logger = logging.getLogger(__name__)


class CreateRoomRequest(BaseModel):
    """Menu the new room starts with; the host menu file when omitted."""
    menu: Optional[List[MenuItem]] = None


class CreateRoomResponse(BaseModel):
    """Id of the created room."""
    room_id: str


class ManualInputRequest(BaseModel):
    """Text typed into the shared code field."""
    text: str


def _sync_failed(e: RoomSyncError) -> HTTPException:
    if isinstance(e, RoomNotFoundError):
        return HTTPException(status_code=404, detail=ROOM_NOT_FOUND_DETAIL)
    return HTTPException(status_code=502, detail=SYNC_FAILED_DETAIL)


@router.post("/api/rooms", response_model=CreateRoomResponse)
async def create_room(
    body: CreateRoomRequest,
    room_client: RoomClient = Depends(get_room_client),
):
    """Create a cloud room for a menu."""
    menu = host_menu() if body.menu is None else body.menu
    logger.info(f"[ROOMS] Create requested - {len(menu)} menu items")
    try:
        room_id = await room_client.create_room(menu)
    except RoomSyncError as e:
        logger.warning(f"[ROOMS] Create failed - Error: {type(e).__name__}: {e.message}")
        raise _sync_failed(e)
    return CreateRoomResponse(room_id=room_id)


@router.get("/api/rooms/{room_id}", response_model=Room)
async def get_room(
    room_id: str,
    room_client: RoomClient = Depends(get_room_client),
):
    """Fetch the current room document."""
    try:
        return await room_client.poll_room(room_id)
    except RoomSyncError as e:
        logger.warning(
            f"[ROOMS] Poll failed - room_id: {room_id}, Error: {type(e).__name__}: {e.message}"
        )
        raise _sync_failed(e)


@router.post("/api/rooms/{room_id}/orders", response_model=Room)
async def submit_room_order(
    room_id: str,
    order: Order,
    room_client: RoomClient = Depends(get_room_client),
):
    """Append an order to a room; repeats of the same order are ignored."""
    logger.info(f"[ROOMS] Order submit requested - room_id: {room_id}, emp_name: {order.emp_name}")
    try:
        return await room_client.submit_order(room_id, order)
    except RoomSyncError as e:
        logger.warning(
            f"[ROOMS] Submit failed - room_id: {room_id}, Error: {type(e).__name__}: {e.message}"
        )
        raise _sync_failed(e)


@router.post("/api/rooms/resolve", response_model=ManualInput)
async def resolve_manual_input(body: ManualInputRequest):
    """Tell whether typed input is a room id or a menu code."""
    return classify_manual_input(body.text)
