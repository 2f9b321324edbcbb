"""Package configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bitperms.constants import DEFAULT_FLAG_SPACE, ENV_PREFIX


class Settings(BaseSettings):
    """Settings loaded from ``BITPERMS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Store
    default_flag_space: int = DEFAULT_FLAG_SPACE

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @field_validator("default_flag_space")
    @classmethod
    def validate_default_flag_space(cls, v: int) -> int:
        """Reject flag spaces that leave no addressable bit.

        Args:
            v: The configured flag space

        Returns:
            The validated flag space

        Raises:
            ValueError: If the flag space is below 1
        """
        if v < 1:
            raise ValueError("BITPERMS_DEFAULT_FLAG_SPACE must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
