"""Shared test fixtures and configuration."""
import pytest
from pathlib import Path
from fastapi.testclient import TestClient

from quickbite.main import app
from quickbite.core.dependencies import get_callback_notifier, get_room_client
from quickbite.services.codec.models import MenuItem, Order, OrderLine
from quickbite.services.rooms.client import RoomClient
from quickbite.services.rooms.in_memory_store import InMemoryDocumentStore


@pytest.fixture
def fried_rice():
    """Single plain menu item."""
    return MenuItem(
        name="Fried Rice",
        price="80",
        note="",
        has_addon=False,
        addon_name="",
        addon_price="",
    )


@pytest.fixture
def sample_menu(fried_rice):
    """Menu with a plain item and an item with an add-on."""
    return [
        fried_rice,
        MenuItem(
            name="Milk Tea",
            price="45",
            note="less ice",
            has_addon=True,
            addon_name="pearls",
            addon_price="10",
        ),
        MenuItem(name="Beef Noodles", price="120.5", note="spicy"),
    ]


@pytest.fixture
def sample_order():
    """Order from one participant."""
    return Order(
        emp_id="E042",
        emp_name="Alex",
        phone="0912-345-678",
        order_note="no cutlery",
        total=190.0,
        timestamp="2026-10-17T11:30:00.000Z",
        items=[
            OrderLine(name="Fried Rice", price="80", quantity=1),
            OrderLine(
                name="Milk Tea",
                price="45",
                note="less ice",
                has_addon=True,
                addon_name="pearls",
                addon_price="10",
                quantity=2,
            ),
        ],
    )


@pytest.fixture
def test_menu_path():
    """Return path to test menu YAML file."""
    return Path(__file__).parent / "fixtures" / "test_menu.yaml"


@pytest.fixture
def document_store():
    """In-memory document store."""
    return InMemoryDocumentStore()


@pytest.fixture
def room_client(document_store):
    """Room client over the in-memory store."""
    return RoomClient(store=document_store)


@pytest.fixture
def callback_calls():
    """Orders received by the fake callback notifier."""
    return []


@pytest.fixture
def test_client(room_client, callback_calls):
    """Create FastAPI test client with overrides."""

    class RecordingNotifier:
        async def submit(self, url, order):
            callback_calls.append((url, order))

    app.dependency_overrides[get_room_client] = lambda: room_client
    app.dependency_overrides[get_callback_notifier] = lambda: RecordingNotifier()

    client = TestClient(app)

    yield client

    # Clear overrides
    app.dependency_overrides.clear()
