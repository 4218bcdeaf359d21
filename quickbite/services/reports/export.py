"""Tabular order report for file export or spreadsheet paste."""
import logging
from typing import Iterable, List

from quickbite.services.codec.models import Order

logger = logging.getLogger(__name__)

REPORT_HEADERS = [
    "Timestamp",
    "Name",
    "Employee ID",
    "Phone",
    "Items",
    "Add-ons",
    "Item Notes",
    "Order Note",
    "Total",
]


def _quote(cell: object) -> str:
    return '"' + str(cell).replace('"', '""') + '"'


def _format_total(total: float) -> str:
    return str(int(total)) if float(total).is_integer() else str(total)


def report_row(order: Order) -> List[str]:
    """Project one order onto the report columns."""
    return [
        order.timestamp,
        order.emp_name,
        order.emp_id,
        order.phone,
        "; ".join(f"{line.name}x{line.quantity}" for line in order.items),
        "; ".join(
            line.addon_name for line in order.items if line.has_addon and line.addon_name
        ),
        "; ".join(line.note for line in order.items if line.note),
        order.order_note,
        _format_total(order.total),
    ]


def render_report(orders: Iterable[Order], delimiter: str = ",") -> str:
    """
    Render orders as quote-wrapped delimited text.

    Use "," for a CSV file and "\\t" for pasting into a spreadsheet.
    """
    rows = [REPORT_HEADERS] + [report_row(order) for order in orders]
    logger.info(f"[REPORT] Report rendered - {len(rows) - 1} orders")
    return "\n".join(delimiter.join(_quote(cell) for cell in row) for row in rows)
