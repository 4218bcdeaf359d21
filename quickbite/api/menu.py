"""Host menu endpoint."""
import logging
from typing import List

from fastapi import APIRouter, HTTPException

from quickbite.api.errors import MENU_FILE_DETAIL, NO_MENU_DETAIL
from quickbite.core.config import settings
from quickbite.services.codec.models import MenuItem
from quickbite.services.menu.loader import MenuFileError, load_menu_file

router = APIRouter()
logger = logging.getLogger(__name__)


def host_menu() -> List[MenuItem]:
    """
    Load the menu file configured for this host.

    Raises:
        HTTPException: 400 if no menu file is configured, 500 if it cannot be read
    """
    if not settings.menu_file:
        raise HTTPException(status_code=400, detail=NO_MENU_DETAIL)
    try:
        return load_menu_file(settings.menu_file)
    except MenuFileError as e:
        logger.error(f"[MENU] Menu file failed - Error: {str(e)}")
        raise HTTPException(status_code=500, detail=MENU_FILE_DETAIL)


@router.get("/api/menu", response_model=List[MenuItem])
async def get_menu():
    """Get the host's configured menu."""
    menu = host_menu()
    logger.info(f"[MENU] Menu served - {len(menu)} items")
    return menu
