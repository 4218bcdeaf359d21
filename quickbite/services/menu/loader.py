"""Menu definition files."""
import logging
from pathlib import Path
from typing import List, Union

import yaml
from pydantic import ValidationError

from quickbite.services.codec.models import MenuItem

logger = logging.getLogger(__name__)


class MenuFileError(ValueError):
    """Menu file is missing or malformed."""


def load_menu_file(menu_file: Union[str, Path]) -> List[MenuItem]:
    """
    Load a host menu from a YAML (or JSON) file.

    The file holds either a list of items or a mapping with an `items`
    list. Numeric prices are read as strings.

    Raises:
        MenuFileError: If the file is missing or not a valid menu
    """
    menu_file = Path(menu_file)
    if not menu_file.exists():
        raise MenuFileError(f"Menu file not found: {menu_file}")

    with open(menu_file, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise MenuFileError(f"Menu file is not valid YAML: {str(e)}") from e

    if isinstance(data, dict):
        data = data.get("items", [])
    if not isinstance(data, list):
        raise MenuFileError("Menu file must contain a list of items")

    try:
        items = [MenuItem.model_validate(item) for item in data]
    except ValidationError as e:
        raise MenuFileError(f"Invalid menu item: {e.error_count()} errors") from e

    logger.info(f"[MENU] Menu loaded - {len(items)} items from {menu_file.name}")
    return items
