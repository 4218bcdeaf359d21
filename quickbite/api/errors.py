"""User-facing error messages shared by API routers."""

DECODE_FAILED_DETAIL = "Could not read code"
SYNC_FAILED_DETAIL = "Sync failed, notify the organizer"
ROOM_NOT_FOUND_DETAIL = "Room not found"
NO_MENU_DETAIL = "Menu has no items"
MENU_FILE_DETAIL = "Menu file could not be loaded"
