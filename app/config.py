"""
Application configuration.
Uses Pydantic Settings for environment variable management.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Employee Directory"
    APP_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # MongoDB
    MONGO_URL: str = "mongodb://localhost:27017"
    DB_NAME: str = "employee_directory"
    MONGO_TIMEOUT_MS: int = 5000

    # CORS, comma separated
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    LOG_FILE: Optional[str] = None

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @field_validator("LOG_FORMAT")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        if v.lower() not in ("text", "json"):
            raise ValueError("LOG_FORMAT must be 'text' or 'json'")
        return v.lower()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
