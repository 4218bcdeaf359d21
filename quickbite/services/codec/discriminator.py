"""Payload discriminator.

A decoded token is one of three shapes:

    list                          -> MENU          (bare menu)
    {m|menu: list, x|extra: ...}  -> MENU_ENVELOPE (menu plus host metadata)
    {i|items: list, ...}          -> ORDER

Anything else is rejected as DecodeFailure.
"""
from typing import Any, Optional

from pydantic import ValidationError

from quickbite.services.codec.exceptions import DecodeFailure
from quickbite.services.codec.models import (
    MenuItem,
    MenuPayload,
    Order,
    OrderPayload,
    Payload,
    PayloadKind,
)
from quickbite.services.codec.schema import ENVELOPE_ALIASES, lookup


def detect_kind(value: Any) -> Optional[PayloadKind]:
    """Return the payload kind of a decoded value, or None if unrecognized."""
    if isinstance(value, list):
        return PayloadKind.MENU
    if not isinstance(value, dict):
        return None
    if isinstance(lookup(value, "menu", ENVELOPE_ALIASES), list):
        return PayloadKind.MENU_ENVELOPE
    if isinstance(lookup(value, "items"), list):
        return PayloadKind.ORDER
    return None


def classify(value: Any) -> Payload:
    """
    Rebuild a decoded JSON value as a menu or order payload.

    Raises:
        DecodeFailure: If the shape is unrecognized or fields are invalid
    """
    kind = detect_kind(value)
    try:
        if kind is PayloadKind.MENU:
            return MenuPayload(
                kind=kind,
                menu=[MenuItem.model_validate(item) for item in value],
            )
        if kind is PayloadKind.MENU_ENVELOPE:
            return MenuPayload(
                kind=kind,
                menu=[
                    MenuItem.model_validate(item)
                    for item in lookup(value, "menu", ENVELOPE_ALIASES)
                ],
                extra=lookup(value, "extra", ENVELOPE_ALIASES),
            )
        if kind is PayloadKind.ORDER:
            return OrderPayload(order=Order.model_validate(value))
    except ValidationError as e:
        raise DecodeFailure(
            f"Payload does not match {kind} schema: {e.error_count()} errors",
            stage="schema",
        ) from e
    raise DecodeFailure(
        f"Unrecognized payload shape: {type(value).__name__}", stage="schema"
    )
