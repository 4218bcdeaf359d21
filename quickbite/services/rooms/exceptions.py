"""Room sync exceptions."""
from typing import Optional


class RoomSyncError(Exception):
    """Base exception for room store failures."""

    def __init__(
        self,
        message: str,
        room_id: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        self.message = message
        self.room_id = room_id
        self.status_code = status_code
        super().__init__(message)


class RoomNotFoundError(RoomSyncError):
    """The store has no document with this id."""


class RoomDocumentError(RoomSyncError):
    """The store returned something that is not a room document."""
