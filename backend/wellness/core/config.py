"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Wellness Check-ins"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./wellness.db"
    DB_ECHO: bool = False

    # Snapshot storage
    STORAGE_BACKEND: str = "database"  # Options: "database", "file"
    STORAGE_KEY: str = "wellness_checkins_v1"  # Fixed identifier the snapshot is stored under
    STORAGE_FILE: str = "data/wellness_checkins.json"  # Used when STORAGE_BACKEND is "file"

    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:5173"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("STORAGE_BACKEND")
    @classmethod
    def check_storage_backend(cls, v):
        """Only the database and file snapshot stores exist."""
        v = v.lower()
        if v not in ("database", "file"):
            raise ValueError(f"Unknown STORAGE_BACKEND '{v}', expected 'database' or 'file'")
        return v

    # Trends
    DEFAULT_TREND_DAYS: int = 30  # Chart window when none is requested
    MAX_TREND_DAYS: int = 365

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
