"""Menu and order code endpoints."""
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from quickbite.api.errors import DECODE_FAILED_DETAIL, NO_MENU_DETAIL
from quickbite.api.menu import host_menu
from quickbite.core.config import settings
from quickbite.services.codec.exceptions import DecodeFailure, EncodeError
from quickbite.services.codec.models import (
    MenuItem,
    MenuPayload,
    Order,
    PayloadKind,
)
from quickbite.services.codec.payload import decode, encode_menu, encode_order
from quickbite.services.sharing.callback import callback_url
from quickbite.services.sharing.links import build_share_url, extract_token

router = APIRouter()
logger = logging.getLogger(__name__)


class MenuCodeRequest(BaseModel):
    """Menu to share, with optional metadata for participants.

    Without a menu the host's configured menu file is shared.
    """
    menu: Optional[List[MenuItem]] = None
    extra: Optional[Any] = None


class CodeResponse(BaseModel):
    """Encoded token, plus a share link for menus."""
    token: str
    url: Optional[str] = None


class DecodeRequest(BaseModel):
    """Pasted token, `MENU:` code or share link."""
    text: str


class DecodeResponse(BaseModel):
    """Decoded payload."""
    kind: PayloadKind
    menu: Optional[List[MenuItem]] = None
    extra: Optional[Any] = None
    callback_url: Optional[str] = None
    order: Optional[Order] = None


@router.post("/api/codes/menu", response_model=CodeResponse)
async def create_menu_code(body: MenuCodeRequest):
    """Encode a menu into a token and share link."""
    menu = host_menu() if body.menu is None else body.menu
    logger.info(f"[CODES] Menu code requested - {len(menu)} items")
    if not menu:
        raise HTTPException(status_code=400, detail=NO_MENU_DETAIL)
    try:
        token = encode_menu(menu, extra=body.extra)
    except EncodeError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return CodeResponse(token=token, url=build_share_url(token))


@router.post("/api/codes/order", response_model=CodeResponse)
async def create_order_code(order: Order):
    """Encode a participant's order into a token."""
    logger.info(f"[CODES] Order code requested - emp_name: {order.emp_name}")
    return CodeResponse(token=encode_order(order))


@router.post("/api/codes/decode", response_model=DecodeResponse)
async def decode_code(body: DecodeRequest):
    """Decode a pasted token or share link."""
    text = body.text.strip()
    prefix = settings.menu_code_prefix
    if text.upper().startswith(prefix.upper()):
        text = text[len(prefix):]
    try:
        payload = decode(extract_token(text))
    except DecodeFailure:
        raise HTTPException(status_code=400, detail=DECODE_FAILED_DETAIL)

    if isinstance(payload, MenuPayload):
        return DecodeResponse(
            kind=payload.kind,
            menu=payload.menu,
            extra=payload.extra,
            callback_url=callback_url(payload.extra),
        )
    return DecodeResponse(kind=payload.kind, order=payload.order)
