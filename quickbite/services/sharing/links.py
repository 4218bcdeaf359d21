"""Share links and manual code input."""
import logging
from enum import Enum
from typing import Optional
from urllib.parse import quote, unquote, urlsplit

from pydantic import BaseModel

from quickbite.core.config import settings

logger = logging.getLogger(__name__)

MENU_PARAM = "m"


class ManualInputKind(str, Enum):
    """What a value typed into the shared code field refers to."""

    ROOM_ID = "room_id"
    MENU_CODE = "menu_code"

    def __str__(self) -> str:
        """Return the string value of the kind."""
        return self.value


class ManualInput(BaseModel):
    """Classified manual input."""

    kind: ManualInputKind
    value: str


def build_share_url(token: str, base_url: Optional[str] = None) -> str:
    """Build a link that opens with the menu token in the `m` query parameter."""
    base_url = base_url or settings.share_base_url
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{MENU_PARAM}={quote(token, safe='')}"


def extract_token(text: str) -> str:
    """
    Pull a token out of a pasted share link.

    Text without an `m=` parameter is returned unchanged. Plus signs are
    kept literally: they are part of the base64 alphabet, not spaces.
    """
    text = text.strip()
    if f"{MENU_PARAM}=" not in text:
        return text
    query = urlsplit(text).query if "?" in text else text
    for pair in query.split("&"):
        key, _, value = pair.partition("=")
        if key == MENU_PARAM and value:
            return unquote(value)
    return text


def classify_manual_input(
    text: str,
    room_id_max_length: Optional[int] = None,
    menu_prefix: Optional[str] = None,
) -> ManualInput:
    """
    Decide whether manual input is a room id or a menu code.

    A `MENU:` prefix always marks a code. Otherwise short input with no
    colon is a room id, and anything else is a code or share link.
    """
    room_id_max_length = room_id_max_length or settings.room_id_max_length
    menu_prefix = menu_prefix or settings.menu_code_prefix
    value = text.strip()

    if value.upper().startswith(menu_prefix.upper()):
        return ManualInput(
            kind=ManualInputKind.MENU_CODE, value=value[len(menu_prefix):].strip()
        )
    if len(value) < room_id_max_length and ":" not in value:
        logger.debug(f"[SHARE] Manual input treated as room id - length: {len(value)}")
        return ManualInput(kind=ManualInputKind.ROOM_ID, value=value)
    return ManualInput(kind=ManualInputKind.MENU_CODE, value=extract_token(value))
