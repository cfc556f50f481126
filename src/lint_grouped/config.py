"""Configuration management for lint-grouped."""
import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

CONFIG_FILENAME = ".lint-grouped.json"
DEFAULT_COMPACT_PREFIX = "[lint]"

FormatterName = Literal["grouped", "compact", "json"]


class Config(BaseModel):
    """Configuration for lint-grouped with validation."""

    formatter: FormatterName = Field(default="grouped", description="Output formatter")
    color: bool | None = Field(default=None, description="Color output; None auto-detects a TTY")
    compact_prefix: str = Field(
        default=DEFAULT_COMPACT_PREFIX, description="Line prefix for the compact formatter"
    )
    max_warnings: int | None = Field(
        default=None, ge=0, description="Warnings tolerated before exiting non-zero"
    )

    @field_validator("compact_prefix")
    @classmethod
    def validate_compact_prefix(cls, v: str) -> str:
        """Ensure the compact prefix is not blank."""
        if not v.strip():
            raise ValueError("compact_prefix cannot be empty")
        return v

    model_config = {"frozen": False}


def get_default_config() -> Config:
    """Return default configuration.

    Returns:
        Config with default values
    """
    return Config(
        formatter="grouped",
        color=None,
        compact_prefix=DEFAULT_COMPACT_PREFIX,
        max_warnings=None,
    )


def load_config(config_path: Path) -> Config:
    """Load configuration from file or return defaults.

    Supports both snake_case (preferred) and camelCase keys.

    Args:
        config_path: Path to .lint-grouped.json file

    Returns:
        Config object with loaded or default values

    Raises:
        ValueError: If configuration values are invalid
    """
    if not config_path.exists():
        return get_default_config()

    with config_path.open(encoding="utf-8") as f:
        data = json.load(f)

    defaults = get_default_config()

    config_data = {
        "formatter": data.get("formatter", defaults.formatter),
        "color": data.get("color", defaults.color),
        "compact_prefix": data.get(
            "compact_prefix", data.get("compactPrefix", defaults.compact_prefix)
        ),
        "max_warnings": data.get(
            "max_warnings", data.get("maxWarnings", defaults.max_warnings)
        ),
    }

    return Config(**config_data)
