"""Configuration management for Notion Render."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Prefixes Notion uses for internal integration tokens
API_KEY_PREFIXES = ("secret_", "ntn_")


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Notion credentials
    notion_api_key: str = Field(default="", alias="NOTION_API_KEY")
    notion_database_id: str = Field(default="", alias="NOTION_DATABASE_ID")

    # API endpoint settings
    api_base: str = Field(
        default="https://api.notion.com/v1",
        alias="NOTION_API_BASE",
    )
    notion_version: str = Field(
        default="2022-06-28",
        alias="NOTION_VERSION",
    )

    # Request settings
    page_size: int = Field(
        default=100,
        ge=1,
        le=100,
        alias="NOTION_PAGE_SIZE",
    )
    timeout: float = Field(
        default=30.0,
        alias="NOTION_TIMEOUT",
    )
    max_retries: int = Field(
        default=3,
        ge=1,
        alias="NOTION_MAX_RETRIES",
    )

    @property
    def is_configured(self) -> bool:
        """Check that the credentials look like a usable Notion integration."""
        return bool(
            self.notion_api_key
            and self.notion_api_key.startswith(API_KEY_PREFIXES)
            and self.notion_database_id
            and len(self.notion_database_id) > 10
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
