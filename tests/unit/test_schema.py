"""Unit tests for the key minification schema."""
from quickbite.services.codec.models import MenuItem, Order
from quickbite.services.codec.schema import FIELD_ALIASES, drop_null_short_keys, lookup, minify


class TestMinify:
    """Test canonical to short key conversion."""

    def test_minify_renames_known_keys(self):
        """Known canonical keys become short keys."""
        assert minify({"name": "Fried Rice", "hasAddon": False}) == {"n": "Fried Rice", "h": False}

    def test_minify_is_recursive(self):
        """Nested item lists are minified too."""
        value = {"empName": "Alex", "items": [{"name": "Tea", "quantity": 2}]}

        assert minify(value) == {"nm": "Alex", "i": [{"n": "Tea", "q": 2}]}

    def test_minify_keeps_unknown_keys(self):
        """Keys outside the table pass through untouched."""
        assert minify({"gas": "https://example.test", "name": "x"}) == {
            "gas": "https://example.test",
            "n": "x",
        }

    def test_short_keys_are_unique(self):
        """No two canonical fields share a short key."""
        shorts = list(FIELD_ALIASES.values())
        assert len(shorts) == len(set(shorts))

    def test_short_keys_never_collide_with_canonical(self):
        """A short key is never also a canonical key."""
        assert not set(FIELD_ALIASES.values()) & set(FIELD_ALIASES.keys())


class TestAliasReading:
    """Test that either key form is accepted on input."""

    def test_lookup_prefers_short_key(self):
        """Short key wins when both are present."""
        assert lookup({"n": "short", "name": "long"}, "name") == "short"

    def test_lookup_falls_back_to_canonical(self):
        """Canonical key is used when the short one is missing."""
        assert lookup({"name": "long"}, "name") == "long"

    def test_lookup_skips_null_short_key(self):
        """A null short key falls back to the canonical key."""
        assert lookup({"i": None, "items": []}, "items") == []

    def test_model_skips_null_short_key(self):
        """Models read the canonical key when the short one is null."""
        assert drop_null_short_keys({"n": None, "name": "Rice", "gas": None}) == {
            "name": "Rice",
            "gas": None,
        }
        assert MenuItem.model_validate({"n": None, "name": "Rice", "p": None}).name == "Rice"

    def test_menu_item_reads_mixed_keys(self):
        """A menu item may mix short and canonical keys."""
        item = MenuItem.model_validate(
            {"n": "Milk Tea", "price": "45", "nt": "less ice", "hasAddon": True, "an": "pearls"}
        )

        assert item.name == "Milk Tea"
        assert item.price == "45"
        assert item.note == "less ice"
        assert item.has_addon is True
        assert item.addon_name == "pearls"
        assert item.addon_price == ""

    def test_numeric_price_kept_as_string(self):
        """Producers that send numbers still yield string prices."""
        item = MenuItem.model_validate({"n": "Rice", "p": 80})
        assert item.price == "80"

    def test_order_documents_use_canonical_keys(self, sample_order):
        """Room documents and callbacks carry canonical keys."""
        document = sample_order.to_document()

        assert document["empName"] == "Alex"
        assert document["items"][1]["hasAddon"] is True
        assert document["items"][1]["quantity"] == 2
        assert Order.model_validate(document) == sample_order
