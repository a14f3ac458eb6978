from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_HELM_BINARY,
    DEFAULT_LOG_LEVEL,
    DEFAULT_WORKSPACE_PREFIX,
    LOG_LEVELS,
)
from .errors import ValidationError


class Settings(BaseSettings):
    """Runtime settings, read from ``CHARTLOCK_*`` environment variables."""

    helm_binary: str = DEFAULT_HELM_BINARY
    helm_timeout: Optional[float] = None
    log_level: str = DEFAULT_LOG_LEVEL
    workspace_prefix: str = DEFAULT_WORKSPACE_PREFIX

    model_config = SettingsConfigDict(env_prefix="CHARTLOCK_", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.lower()
        if v not in LOG_LEVELS:
            raise ValidationError(
                f"Invalid log level: '{v}'. Supported levels: {', '.join(LOG_LEVELS)}"
            )
        return v

    @field_validator("helm_timeout")
    @classmethod
    def validate_timeout_positive(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValidationError(f"helm_timeout must be positive, got {v}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
