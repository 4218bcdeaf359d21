"""Payload codec: menus and orders to opaque tokens and back."""
import logging
from typing import Any, Iterable, Optional

from quickbite.services.codec.discriminator import classify
from quickbite.services.codec.exceptions import DecodeFailure
from quickbite.services.codec.models import CodecModel, MenuItem, Order, Payload
from quickbite.services.codec.schema import EXTRA_KEY, MENU_KEY, minify
from quickbite.services.codec.transport import pack, unpack

logger = logging.getLogger(__name__)


def _menu_document(item: Any) -> dict:
    # Order lines are reduced to plain menu fields.
    if isinstance(item, CodecModel):
        item = item.to_document()
    return MenuItem.model_validate(item).to_document()


def encode_menu(menu: Iterable[MenuItem], extra: Optional[Any] = None) -> str:
    """
    Encode a menu into a token.

    Args:
        menu: Menu items in display order
        extra: Optional JSON metadata for participants (e.g. a callback URL);
            passed through without key minification

    Returns:
        Printable base64 token
    """
    items = [minify(_menu_document(item)) for item in menu]
    value: Any = items if extra is None else {MENU_KEY: items, EXTRA_KEY: extra}
    token = pack(value)
    logger.info(
        f"[CODEC] Menu encoded - {len(items)} items, "
        f"extra: {extra is not None}, token length: {len(token)}"
    )
    return token


def encode_order(order: Order) -> str:
    """Encode a participant's order into a token."""
    token = pack(minify(order.to_document()))
    logger.info(
        f"[CODEC] Order encoded - {len(order.items)} lines, token length: {len(token)}"
    )
    return token


def decode(token: str) -> Payload:
    """
    Decode a token into a menu or order payload.

    Raises:
        DecodeFailure: If any stage fails, whatever the cause
    """
    try:
        payload = classify(unpack(token))
    except DecodeFailure as e:
        logger.warning(
            f"[CODEC] Decode failed - stage: {e.stage}, "
            f"token length: {len(token)}, Error: {type(e).__name__}: {e.message}"
        )
        raise
    logger.info(f"[CODEC] Token decoded - kind: {payload.kind}")
    return payload
