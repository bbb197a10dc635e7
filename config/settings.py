from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Remote REST API
    api_base_url: str = "http://localhost:9090/api"
    # Uploaded images come back as "/uploads/..." paths relative to this host
    uploads_base_url: str = "http://localhost:9090"

    # HTTP timeouts in seconds (must be finite)
    connect_timeout: float = 12.0
    read_timeout: float = 30.0

    # UI
    app_title: str = "HomeTail"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
