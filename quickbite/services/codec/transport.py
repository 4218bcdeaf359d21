"""Text transport encoding.

Turns compressed bytes into printable base64 text and back. Decoding is
tolerant of what chat apps, clipboards and retyping do to a token.
"""
import base64
import binascii
import json
import re
from typing import Any

from quickbite.services.codec.compression import compress, decompress
from quickbite.services.codec.exceptions import DecodeFailure, EncodeError

_WHITESPACE = re.compile(r"\s+")
_ZERO_WIDTH = re.compile("[\u200b-\u200d\ufeff]")
_LEADING_QUOTE = re.compile(r"^[\"']")
_TRAILING_QUOTE = re.compile(r"[\"']$")
_NON_BASE64 = re.compile(r"[^A-Za-z0-9+/=]")


def to_text(data: bytes) -> str:
    """Encode bytes as standard padded base64."""
    return base64.b64encode(data).decode("ascii")


def sanitize(text: str) -> str:
    """
    Clean a pasted token before base64 decoding.

    Steps run in a fixed order: whitespace, zero-width characters and
    BOMs, one surrounding quote on each end, anything outside the base64
    alphabet, then re-padding to a multiple of four.
    """
    clean = _WHITESPACE.sub("", text)
    clean = _ZERO_WIDTH.sub("", clean)
    clean = _LEADING_QUOTE.sub("", clean)
    clean = _TRAILING_QUOTE.sub("", clean)
    clean = _NON_BASE64.sub("", clean)
    # Padding goes last: every earlier step changes the length.
    if len(clean) % 4:
        clean += "=" * (4 - len(clean) % 4)
    return clean


def from_text(text: str) -> bytes:
    """
    Sanitize and base64-decode a token.

    Raises:
        DecodeFailure: If nothing decodable is left after sanitizing
    """
    clean = sanitize(text)
    if not clean:
        raise DecodeFailure("Empty code", stage="base64")
    try:
        return base64.b64decode(clean, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeFailure(f"Invalid base64: {str(e)}", stage="base64") from e


def pack(value: Any) -> str:
    """Serialize a JSON value into a token."""
    try:
        text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError, RecursionError) as e:
        raise EncodeError(f"Value is not JSON serializable: {str(e)}", stage="json") from e
    return to_text(compress(text.encode("utf-8")))


def unpack(token: str) -> Any:
    """
    Reverse `pack`: sanitize, base64-decode, decompress, parse JSON.

    Raises:
        DecodeFailure: On any failing stage (CorruptStreamError included)
    """
    data = decompress(from_text(token))
    try:
        return json.loads(data.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise DecodeFailure(f"Payload is not UTF-8: {str(e)}", stage="json") from e
    except json.JSONDecodeError as e:
        raise DecodeFailure(f"Payload is not JSON: {str(e)}", stage="json") from e
    except RecursionError as e:
        raise DecodeFailure("Payload is nested too deeply", stage="json") from e
