"""Application configuration from environment."""
from pathlib import Path

from fastapi import Request
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Study Hub Backend"
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./compre.db"

    # Uploads: stored on disk, served read-only under uploads_url_prefix
    upload_dir: str = "uploads"
    uploads_url_prefix: str = "/uploads"

    cors_origins: list[str] = ["*"]

    # The one user allowed to delete anybody's file
    admin_username: str = "admin"

    # XP awarded for each new reflection
    reflection_xp_reward: int = 15

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # text | json

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def upload_path(self) -> Path:
        return Path(self.upload_dir).resolve()


def get_settings() -> Settings:
    return Settings()


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings
