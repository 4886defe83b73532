"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from syncwatch.constants.defaults import (
    BASE_URL_DEFAULT,
    HIGHLIGHT_TTL_SECONDS_DEFAULT,
    HISTORY_CAPACITY_DEFAULT,
    LOGS_AUTO_REFRESH_DEFAULT,
    LOGS_REFRESH_INTERVAL_DEFAULT,
    MONITOR_REFRESH_INTERVAL_DEFAULT,
    PAGE_SIZE_DEFAULT,
    SYSTEM_REFRESH_INTERVAL_DEFAULT,
    THEME_DEFAULT,
)
from syncwatch.constants.limits import (
    HISTORY_CAPACITY_MIN,
    PAGE_SIZE_MIN,
    REFRESH_INTERVAL_MIN,
)
from syncwatch.constants.timeouts import REQUEST_TIMEOUT


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Connection
    base_url: str = BASE_URL_DEFAULT
    api_token: str = ""
    request_timeout_seconds: float = REQUEST_TIMEOUT

    # Polling (seconds)
    logs_refresh_interval: int = Field(
        default=LOGS_REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN
    )
    monitor_refresh_interval: int = Field(
        default=MONITOR_REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN
    )
    system_refresh_interval: int = Field(
        default=SYSTEM_REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN
    )
    logs_auto_refresh: bool = LOGS_AUTO_REFRESH_DEFAULT

    # Views
    page_size: int = Field(default=PAGE_SIZE_DEFAULT, ge=PAGE_SIZE_MIN)
    history_capacity: int = Field(default=HISTORY_CAPACITY_DEFAULT, ge=HISTORY_CAPACITY_MIN)
    highlight_ttl_seconds: float = Field(default=HIGHLIGHT_TTL_SECONDS_DEFAULT, gt=0)

    # UI preferences
    theme: str = THEME_DEFAULT

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/") or BASE_URL_DEFAULT


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
