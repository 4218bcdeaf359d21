"""Order arithmetic and host-side aggregation."""
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, List

from pydantic import BaseModel

from quickbite.services.codec.models import Order, OrderLine


class ItemSummary(BaseModel):
    """Totals for one menu item across all orders."""

    quantity: int = 0
    total: Decimal = Decimal("0")
    details: List[str] = []


def parse_price(value: str) -> Decimal:
    """Parse a string price, treating blanks and junk as zero."""
    try:
        price = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return Decimal("0")
    return price if price.is_finite() else Decimal("0")


def unit_price(line: OrderLine) -> Decimal:
    """Price of one unit including the add-on when selected."""
    price = parse_price(line.price)
    if line.has_addon:
        price += parse_price(line.addon_price)
    return price


def order_total(lines: Iterable[OrderLine]) -> Decimal:
    """Total for a participant's order lines."""
    return sum((unit_price(line) * line.quantity for line in lines), Decimal("0"))


def active_lines(lines: Iterable[OrderLine]) -> List[OrderLine]:
    """Drop unnamed lines and lines with quantity 0."""
    return [line for line in lines if line.name and line.quantity > 0]


def line_detail(line: OrderLine) -> str:
    """Note and add-on tag for a line, e.g. `less ice / +pearls`."""
    tags = [line.note]
    if line.has_addon and line.addon_name:
        tags.append(f"+{line.addon_name}")
    return " / ".join(tag for tag in tags if tag)


def aggregate_orders(orders: Iterable[Order]) -> Dict[str, ItemSummary]:
    """
    Sum quantities and totals per item name across orders.

    Items keep first-seen order; each distinct note/add-on combination is
    listed once in `details`.
    """
    stats: Dict[str, ItemSummary] = {}
    for order in orders:
        for line in order.items:
            if not line.name:
                continue
            summary = stats.setdefault(line.name, ItemSummary())
            summary.quantity += line.quantity
            summary.total += unit_price(line) * line.quantity
            detail = line_detail(line)
            if detail and detail not in summary.details:
                summary.details.append(detail)
    return stats


def finalize_order(order: Order) -> Order:
    """
    Prepare a participant's order for sharing.

    Inactive lines are dropped, the total is recomputed from the lines
    and a UTC ISO-8601 timestamp is stamped when none was supplied.
    """
    lines = active_lines(order.items)
    timestamp = order.timestamp or datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return order.model_copy(
        update={
            "items": lines,
            "total": float(order_total(lines)),
            "timestamp": timestamp,
        }
    )
