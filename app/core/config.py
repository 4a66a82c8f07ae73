"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App Info
    app_name: str = "Coletivo À Margem"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1

    # Database
    data_save_folder: str = "./data"
    db_file: str = "margem.db"
    database_url_override: str | None = Field(default=None, alias="DATABASE_URL")

    @property
    def database_url(self) -> str:
        """SQLAlchemy database URL (SQLite file unless DATABASE_URL is set)."""
        if self.database_url_override:
            return self.database_url_override
        db_path = Path(self.data_save_folder) / self.db_file
        return f"sqlite+aiosqlite:///{db_path}"

    # Images
    image_cache_max_age: int = 120  # seconds
    default_image_type: str = "image/jpeg"

    # Timeline page
    timeline_rows: int = 6
    timeline_chars_per_line: int = 60

    # Optional YAML file seeded on startup
    seed_file: str | None = Field(default=None, alias="SEED_FILE")

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["GET", "HEAD", "OPTIONS"]
    cors_allow_headers: list[str] = ["*"]

    @field_validator("timeline_rows", "timeline_chars_per_line")
    @classmethod
    def positive(cls, v: int) -> int:
        """Truncation parameters must be positive."""
        if v < 1:
            raise ValueError("must be >= 1")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
