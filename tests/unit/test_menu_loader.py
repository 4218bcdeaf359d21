"""Unit tests for loading host menu files."""
import pytest

from quickbite.services.menu.loader import MenuFileError, load_menu_file


class TestMenuLoader:
    """Test menu definition files."""

    def test_load_menu_from_yaml(self, test_menu_path):
        """Items load in file order with string prices."""
        menu = load_menu_file(test_menu_path)

        assert [item.name for item in menu] == ["Fried Rice", "Milk Tea", "Dumplings"]
        assert menu[0].price == "80"
        assert menu[1].has_addon is True
        assert menu[1].addon_name == "pearls"
        assert menu[2].price == "3.5"

    def test_load_top_level_list(self, tmp_path):
        """A bare list of items is accepted."""
        menu_file = tmp_path / "menu.yaml"
        menu_file.write_text("- name: Rice\n  price: '80'\n", encoding="utf-8")

        assert load_menu_file(menu_file)[0].name == "Rice"

    def test_load_json_file(self, tmp_path):
        """JSON menus load too."""
        menu_file = tmp_path / "menu.json"
        menu_file.write_text('[{"name": "Rice", "price": "80"}]', encoding="utf-8")

        assert load_menu_file(menu_file)[0].price == "80"

    def test_missing_file(self, tmp_path):
        """A missing file raises MenuFileError."""
        with pytest.raises(MenuFileError):
            load_menu_file(tmp_path / "missing.yaml")

    def test_not_a_list(self, tmp_path):
        """Scalars are not menus."""
        menu_file = tmp_path / "menu.yaml"
        menu_file.write_text("just a string\n", encoding="utf-8")

        with pytest.raises(MenuFileError):
            load_menu_file(menu_file)

    def test_item_without_name(self, tmp_path):
        """Every item needs a name."""
        menu_file = tmp_path / "menu.yaml"
        menu_file.write_text("items:\n  - price: 10\n", encoding="utf-8")

        with pytest.raises(MenuFileError):
            load_menu_file(menu_file)

    def test_invalid_yaml(self, tmp_path):
        """Broken YAML raises MenuFileError."""
        menu_file = tmp_path / "menu.yaml"
        menu_file.write_text("items: [unclosed\n", encoding="utf-8")

        with pytest.raises(MenuFileError):
            load_menu_file(menu_file)
