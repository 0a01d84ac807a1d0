from pathlib import Path
from typing import Optional

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

import os

from .brush_settings import BrushSettings

# Load .env for local/dev environments only if values are missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from HEIGHTBRUSH_* environment variables."""

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Brush Defaults
    brush_size: int = Field(default=10, gt=0, description="Default brush size in samples")
    initial_height: Optional[float] = Field(
        default=None, description="Override for the session start height"
    )
    falloff: str = Field(default="in_out_cubic", description="Default circular brush falloff")

    model_config = SettingsConfigDict(
        env_prefix="HEIGHTBRUSH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Instantiate singleton settings object
settings = Settings()


def get_brush_settings(source: Optional[Settings] = None) -> BrushSettings:
    """Build brush settings from application settings."""
    source = source or settings
    return BrushSettings(
        brush_size=source.brush_size,
        initial_height=source.initial_height,
        falloff=source.falloff,
    )
