"""Server configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from KOTLIN_SENIOR_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KOTLIN_SENIOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    server_name: str = "mcp-kotlin-senior"
    server_version: str = "1.0.0"

    # stdio for agent runtimes that spawn the server, streamable-http for a service
    transport: Literal["stdio", "streamable-http"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
