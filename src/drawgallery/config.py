"""Configuration management using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # Storage configuration
    images_dir: str = "./img"
    metadata_filename: str = "meta.json"
    static_dir: str = "./public"

    # Serialize metadata read-modify-write cycles inside this process
    lock_metadata_writes: bool = False

    # Largest accepted request body, matching the editor's 10 MB canvas uploads
    max_body_bytes: int = 10 * 1024 * 1024

    # Display
    currency_sign: str = "€"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # CORS settings - stored as comma-separated string for env var compatibility
    cors_origins_str: str = Field(
        default="*",
        validation_alias="CORS_ALLOWED_ORIGINS",
    )

    @model_validator(mode="after")
    def ensure_images_dir_exists(self) -> Self:
        """Ensure the image directory exists after settings are loaded."""
        self.images_path.mkdir(parents=True, exist_ok=True)
        return self

    @property
    def images_path(self) -> Path:
        """Get the image directory path."""
        return Path(self.images_dir)

    @property
    def static_path(self) -> Path:
        """Get the static front-end directory path."""
        return Path(self.static_dir)

    @property
    def cors_allowed_origins(self) -> list[str]:
        """CORS allowed origins as a list."""
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
