"""Runtime settings.

Values come from environment variables prefixed with ``LUNCHES_`` (for
example ``LUNCHES_DATA_DIR``) or from a ``.env`` file in the working
directory, validated by Pydantic Settings.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LUNCHES_", env_file=".env", extra="ignore")

    data_dir: Path = Field(default=_DEFAULT_DATA_DIR, description="Directory holding the JSON store.")
    log_level: str = Field(default="WARNING")
    currency: str = Field(default="USD", min_length=3, max_length=3)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level {value!r}")
        return level

    @field_validator("currency")
    @classmethod
    def _upper_currency(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
