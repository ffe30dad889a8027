from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Local dev: load from .env automatically.
    model_config = SettingsConfigDict(env_prefix="", extra="ignore", env_file=".env", env_file_encoding="utf-8")

    # Env vars:
    # - USERNAME_MIN_LENGTH / USERNAME_MAX_LENGTH (inclusive bounds)
    # - PASSWORD_MIN_LENGTH
    # - LOG_LEVEL (DEBUG, INFO, WARNING, ...)
    username_min_length: int = Field(default=5, ge=1, validation_alias="USERNAME_MIN_LENGTH")
    username_max_length: int = Field(default=20, ge=1, validation_alias="USERNAME_MAX_LENGTH")
    password_min_length: int = Field(default=8, ge=1, validation_alias="PASSWORD_MIN_LENGTH")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @model_validator(mode="after")
    def _check_username_bounds(self) -> "Settings":
        if self.username_min_length > self.username_max_length:
            raise ValueError("USERNAME_MIN_LENGTH must not exceed USERNAME_MAX_LENGTH")
        self.log_level = (self.log_level or "INFO").upper().strip()
        return self


def get_settings() -> Settings:
    """Load settings from environment.

    Keep this as the single canonical constructor for Settings(). Tests can
    monkeypatch this function.
    """
    return Settings()
