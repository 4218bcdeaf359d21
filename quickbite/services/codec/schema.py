"""Key minification schema.

Verbose field names are shrunk to one or two character keys before
compression. Decoding accepts either the short or the canonical key for
every field, so tokens from older producers (or hand-built payloads with
canonical names) still read.
"""
from typing import Any, Dict

from pydantic import AliasChoices, Field

# canonical -> short
FIELD_ALIASES: Dict[str, str] = {
    "name": "n",
    "price": "p",
    "note": "nt",
    "hasAddon": "h",
    "addonName": "an",
    "addonPrice": "ap",
    "quantity": "q",
    "empId": "id",
    "empName": "nm",
    "phone": "ph",
    "orderNote": "on",
    "total": "t",
    "timestamp": "ts",
    "items": "i",
}

# Envelope keys for a menu carrying side-channel metadata.
MENU_KEY = "m"
EXTRA_KEY = "x"
ENVELOPE_ALIASES: Dict[str, str] = {
    "menu": MENU_KEY,
    "extra": EXTRA_KEY,
}


def keyed(canonical: str, **kwargs: Any) -> Any:
    """Declare a model field readable by its short or canonical key.

    The short key wins when both are present. Serialization uses the
    canonical key; `minify` produces the short form for tokens.
    """
    short = FIELD_ALIASES[canonical]
    return Field(
        validation_alias=AliasChoices(short, canonical),
        serialization_alias=canonical,
        **kwargs,
    )


def lookup(value: Dict[str, Any], canonical: str, table: Dict[str, str] = FIELD_ALIASES) -> Any:
    """Read a field by short key, falling back to the canonical key."""
    short = table[canonical]
    if value.get(short) is not None:
        return value[short]
    return value.get(canonical)


def minify(value: Any) -> Any:
    """Recursively rename canonical keys to their short form.

    Keys outside the table are kept as-is.
    """
    if isinstance(value, dict):
        return {FIELD_ALIASES.get(key, key): minify(item) for key, item in value.items()}
    if isinstance(value, list):
        return [minify(item) for item in value]
    return value


def drop_null_short_keys(value: Any) -> Any:
    """Remove short keys holding null so the canonical key is read instead."""
    if not isinstance(value, dict):
        return value
    shorts = set(FIELD_ALIASES.values())
    return {key: item for key, item in value.items() if not (key in shorts and item is None)}
