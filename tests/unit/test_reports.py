"""Unit tests for order arithmetic, aggregation and report export."""
from datetime import datetime
from decimal import Decimal

from quickbite.services.codec.models import Order, OrderLine
from quickbite.services.reports.aggregate import (
    active_lines,
    aggregate_orders,
    finalize_order,
    line_detail,
    order_total,
    parse_price,
)
from quickbite.services.reports.export import REPORT_HEADERS, render_report


class TestOrderArithmetic:
    """Test price parsing and totals."""

    def test_parse_price(self):
        """String prices parse; junk counts as zero."""
        assert parse_price("80") == Decimal("80")
        assert parse_price(" 12.5 ") == Decimal("12.5")
        assert parse_price("") == Decimal("0")
        assert parse_price("free") == Decimal("0")
        assert parse_price("NaN") == Decimal("0")
        assert parse_price("Infinity") == Decimal("0")

    def test_order_total_includes_addons(self, sample_order):
        """80 x1 + (45 + 10) x2."""
        assert order_total(sample_order.items) == Decimal("190")

    def test_addon_price_ignored_without_addon(self):
        """Add-on price only counts when the add-on is selected."""
        line = OrderLine(name="Tea", price="40", addon_price="10", has_addon=False, quantity=2)
        assert order_total([line]) == Decimal("80")

    def test_active_lines(self):
        """Unnamed and zero-quantity lines are dropped."""
        lines = [
            OrderLine(name="Rice", price="80", quantity=1),
            OrderLine(name="Soup", price="30", quantity=0),
            OrderLine(name="", price="10", quantity=3),
        ]
        assert [line.name for line in active_lines(lines)] == ["Rice"]

    def test_line_detail(self):
        """Notes and add-ons are tagged together."""
        assert line_detail(OrderLine(name="Tea", note="less ice", has_addon=True, addon_name="pearls")) == "less ice / +pearls"
        assert line_detail(OrderLine(name="Tea", has_addon=True, addon_name="pearls")) == "+pearls"
        assert line_detail(OrderLine(name="Tea", addon_name="pearls")) == ""


class TestFinalizeOrder:
    """Test preparing an order for sharing."""

    def test_finalize_drops_inactive_and_recomputes_total(self, sample_order):
        """Totals come from the kept lines."""
        order = sample_order.model_copy(
            update={
                "total": 0,
                "items": sample_order.items + [OrderLine(name="Soup", price="30", quantity=0)],
            }
        )

        finalized = finalize_order(order)

        assert [line.name for line in finalized.items] == ["Fried Rice", "Milk Tea"]
        assert finalized.total == 190.0
        assert finalized.timestamp == sample_order.timestamp

    def test_finalize_stamps_missing_timestamp(self):
        """A blank timestamp is filled with the current UTC time."""
        finalized = finalize_order(
            Order(emp_name="Kim", items=[OrderLine(name="Rice", price="80", quantity=1)])
        )

        stamp = datetime.fromisoformat(finalized.timestamp)
        assert stamp.tzinfo is not None


class TestAggregation:
    """Test per-item aggregation across orders."""

    def test_aggregate_orders(self, sample_order):
        """Quantities and totals are summed per item name."""
        other = Order(
            emp_name="Sam",
            timestamp="2026-10-17T11:31:00Z",
            items=[
                OrderLine(name="Milk Tea", price="45", note="no sugar", quantity=1),
                OrderLine(name="Fried Rice", price="80", quantity=2),
                OrderLine(name="", price="5", quantity=1),
            ],
        )

        stats = aggregate_orders([sample_order, other])

        assert list(stats) == ["Fried Rice", "Milk Tea"]
        assert stats["Fried Rice"].quantity == 3
        assert stats["Fried Rice"].total == Decimal("240")
        assert stats["Milk Tea"].quantity == 3
        assert stats["Milk Tea"].total == Decimal("155")
        assert stats["Milk Tea"].details == ["less ice / +pearls", "no sugar"]

    def test_aggregate_details_are_distinct(self, sample_order):
        """The same note is listed once."""
        stats = aggregate_orders([sample_order, sample_order])
        assert stats["Milk Tea"].details == ["less ice / +pearls"]

    def test_aggregate_empty(self):
        """No orders, no stats."""
        assert aggregate_orders([]) == {}


class TestReportExport:
    """Test delimited report rendering."""

    def test_render_csv(self, sample_order):
        """Header row plus one quoted row per order."""
        lines = render_report([sample_order]).split("\n")

        assert lines[0] == ",".join(f'"{header}"' for header in REPORT_HEADERS)
        assert lines[1] == (
            '"2026-10-17T11:30:00.000Z","Alex","E042","0912-345-678",'
            '"Fried Ricex1; Milk Teax2","pearls","less ice","no cutlery","190"'
        )

    def test_render_tsv(self, sample_order):
        """Tab delimiter for spreadsheet paste."""
        lines = render_report([sample_order, sample_order], delimiter="\t").split("\n")

        assert len(lines) == 3
        assert lines[1].split("\t")[1] == '"Alex"'

    def test_embedded_quotes_are_doubled(self, sample_order):
        """Quotes inside cells are escaped."""
        order = sample_order.model_copy(update={"order_note": 'say "hi"', "total": 12.5})
        row = render_report([order]).split("\n")[1]

        assert '"say ""hi"""' in row
        assert row.endswith('"12.5"')

    def test_render_no_orders(self):
        """Only the header is rendered."""
        assert render_report([]).count("\n") == 0
