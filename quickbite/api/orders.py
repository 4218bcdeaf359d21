"""Participant order endpoints."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from quickbite.api.errors import SYNC_FAILED_DETAIL
from quickbite.core.dependencies import get_callback_notifier
from quickbite.services.codec.models import Order
from quickbite.services.reports.aggregate import finalize_order
from quickbite.services.rooms.exceptions import RoomSyncError
from quickbite.services.sharing.callback import CallbackNotifier

router = APIRouter()
logger = logging.getLogger(__name__)


class CallbackRequest(BaseModel):
    """Order to deliver to the host's callback endpoint."""
    url: str
    order: Order


@router.post("/api/orders/finalize", response_model=Order)
async def finalize(order: Order):
    """Drop inactive lines, recompute the total and stamp the time."""
    finalized = finalize_order(order)
    logger.info(
        f"[ORDERS] Order finalized - emp_name: {finalized.emp_name}, "
        f"{len(finalized.items)} of {len(order.items)} lines kept"
    )
    return finalized


@router.post("/api/orders/callback")
async def deliver_to_callback(
    body: CallbackRequest,
    notifier: CallbackNotifier = Depends(get_callback_notifier),
):
    """Post an order to the host's callback endpoint."""
    try:
        await notifier.submit(body.url, body.order)
    except RoomSyncError as e:
        logger.warning(f"[ORDERS] Callback delivery failed - Error: {e.message}")
        raise HTTPException(status_code=502, detail=SYNC_FAILED_DETAIL)
    return {"delivered": True}
