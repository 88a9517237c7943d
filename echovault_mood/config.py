"""
Configuration for the EchoVault mood service.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from ECHOVAULT_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="ECHOVAULT_")

    history_capacity: int = Field(default=50, ge=1, description="Moods kept in history")
    seed_history: bool = Field(
        default=True, description="Start with five sample moods from past days"
    )

    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    log_level: str = "info"
    log_json: bool = False

    base_url: str = Field(
        default="http://localhost:8000", description="Service URL used by the CLI"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid = {"debug", "info", "warning", "error", "critical"}
        if v.lower() not in valid:
            raise ValueError(f"Invalid log level: {v}")
        return v.lower()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
