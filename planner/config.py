"""
Application configuration using Pydantic Settings
"""
from functools import lru_cache
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables
    """
    # Application
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Overlap layout
    LAYOUT_DEFAULT_TASK_DURATION: int = 30  # minutes, for tasks without a valid duration
    LAYOUT_MIN_EVENT_DURATION: int = 1  # minutes, zero-length events are stretched to this
    LAYOUT_STRICT_INVARIANTS: bool = False  # raise InvariantViolation instead of falling back to column 0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """logging accepts upper-case level names only (info -> INFO)"""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings instance (singleton)
    """
    return Settings()
