"""
Configuration management for lifecycle-actions.

Settings are read from the environment (prefix ``LIFECYCLE_ACTIONS_``) and an
optional ``.env`` file.
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_BASE_PATH = "/rhn/manager/api/contentmanagement"
DEFAULT_AUTO_CLOSE_MS = 6000


class LifecycleActionsSettings(BaseSettings):
    """Settings for the action controller, its HTTP transport and notifications."""

    model_config = SettingsConfigDict(
        env_prefix="LIFECYCLE_ACTIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # API Configuration
    api_base_path: str = Field(default=DEFAULT_API_BASE_PATH)
    server_url: str = Field(default="")

    # HTTP Client Configuration
    request_timeout_seconds: float = Field(default=30.0, gt=0)
    verify_ssl: bool = Field(default=True)
    user_agent: str = Field(default="lifecycle-actions/1.0")

    # Notification Configuration
    notification_auto_close_ms: int = Field(default=DEFAULT_AUTO_CLOSE_MS, gt=0)

    @field_validator("api_base_path")
    @classmethod
    def normalize_base_path(cls, value: str) -> str:
        """Ensure a single leading slash and no trailing slash."""
        value = value.strip().strip("/")
        return f"/{value}" if value else ""

    @field_validator("server_url")
    @classmethod
    def normalize_server_url(cls, value: str) -> str:
        return value.strip().rstrip("/")


@lru_cache()
def get_settings() -> LifecycleActionsSettings:
    """Get cached settings instance."""
    return LifecycleActionsSettings()
