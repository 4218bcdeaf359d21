"""Application configuration."""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Room store
    room_store_url: str = "https://jsonblob.com/api/jsonBlob"
    room_store_timeout: float = 10.0
    room_poll_interval: float = 5.0

    # Sharing
    share_base_url: str = "http://localhost:8000/"
    room_id_max_length: int = 25
    menu_code_prefix: str = "MENU:"

    # Host callback
    callback_timeout: float = 10.0

    # Host menu file used when a request carries no menu
    menu_file: Optional[str] = None

    # Logging
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
