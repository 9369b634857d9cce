"""Pydantic-based settings for the board server."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration settings for the board server."""

    model_config = SettingsConfigDict(
        env_prefix="BOARD_",
        case_sensitive=False,
        env_file=os.getenv("SETTINGS_ENV_FILE", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=3000, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")

    # Durable store settings
    database_url: str = Field(default="sqlite+aiosqlite:///board.db", description="Durable store URL")
    use_durable_store: bool = Field(default=True, description="Try the durable store before the in-memory mirror")
    create_tables: bool = Field(default=True, description="Create the durable schema on startup")

    @property
    def log_format(self) -> str:
        """Log message format."""
        return "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
