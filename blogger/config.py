"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseModel):
    """Record storage configuration."""

    # Directory holding the posts/, tags/ and authors/ sub-directories
    root: Path = Path("data")

    # Write each record to a temp file, then rename it over the old one.
    # Makes a single record update atomic; a save pass as a whole is not.
    atomic_writes: bool = True

    # JSON indentation for record files (None for compact output)
    indent: int | None = Field(default=2, ge=0)

    encoding: str = "utf-8"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested values use `__`:

        ENVIRONMENT=production
        STORAGE__ROOT=/var/lib/blogger
        STORAGE__ATOMIC_WRITES=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows STORAGE__ROOT syntax
        extra="ignore",
    )

    environment: Literal["test", "development", "production"] = "development"
    debug: bool = False

    # Nested settings
    storage: StorageSettings = StorageSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
