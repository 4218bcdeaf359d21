"""Menu and order models carried inside tokens and room documents."""
from enum import Enum
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from quickbite.services.codec.schema import drop_null_short_keys, keyed


class CodecModel(BaseModel):
    """Base model accepting short or canonical keys on input."""

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _short_key_or_canonical(cls, data: Any) -> Any:
        return drop_null_short_keys(data)

    def to_document(self) -> dict:
        """Dump using canonical (long) keys."""
        return self.model_dump(by_alias=True, mode="json")


class MenuItem(CodecModel):
    """A dish offered by the host.

    Prices stay strings end-to-end; only consumers parse them.
    """

    name: str = keyed("name")
    price: str = keyed("price", default="")
    note: str = keyed("note", default="")
    has_addon: bool = keyed("hasAddon", default=False)
    addon_name: str = keyed("addonName", default="")
    addon_price: str = keyed("addonPrice", default="")


class OrderLine(MenuItem):
    """A menu item with the quantity a participant picked."""

    quantity: int = keyed("quantity", default=0, ge=0)


class Order(CodecModel):
    """A single participant's submission."""

    emp_id: str = keyed("empId", default="")
    emp_name: str = keyed("empName", default="")
    phone: str = keyed("phone", default="")
    order_note: str = keyed("orderNote", default="")
    total: float = keyed("total", default=0)
    timestamp: str = keyed("timestamp", default="")
    items: List[OrderLine] = keyed("items")

    @property
    def natural_key(self) -> tuple:
        """Participant name and timestamp, used to suppress duplicates."""
        return (self.emp_name, self.timestamp)


class PayloadKind(str, Enum):
    """Shapes a decoded token can take."""

    MENU = "menu"
    MENU_ENVELOPE = "menu_envelope"
    ORDER = "order"

    def __str__(self) -> str:
        """Return the string value of the kind."""
        return self.value


class MenuPayload(BaseModel):
    """Decoded menu, optionally with host metadata such as a callback URL."""

    kind: Literal[PayloadKind.MENU, PayloadKind.MENU_ENVELOPE] = PayloadKind.MENU
    menu: List[MenuItem]
    extra: Optional[Any] = None


class OrderPayload(BaseModel):
    """Decoded participant order."""

    kind: Literal[PayloadKind.ORDER] = PayloadKind.ORDER
    order: Order


Payload = Union[MenuPayload, OrderPayload]


class Room(CodecModel):
    """Cloud room document: the host's menu plus every collected order."""

    menu: List[MenuItem] = Field(default_factory=list)
    orders: List[Order] = Field(default_factory=list)

    def has_order(self, order: Order) -> bool:
        """Check whether an order with the same natural key is present."""
        return any(existing.natural_key == order.natural_key for existing in self.orders)
