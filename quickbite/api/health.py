"""Health check endpoint."""
import logging
from urllib.parse import urlsplit

from fastapi import APIRouter

from quickbite.core.config import settings

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check():
    """Report liveness and which room store sync talks to."""
    logger.debug("[HEALTH] Health check requested")
    return {
        "status": "healthy",
        "room_store": urlsplit(settings.room_store_url).netloc,
    }
