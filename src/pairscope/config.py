"""Configuration for Pairscope."""

from __future__ import annotations

import logging
import os
import tomllib
from datetime import timezone, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from pairscope.charts.buckets import ChartColors, parse_time_delta

logger = logging.getLogger(__name__)

COLOR_THEMES = ("dark", "light")


def _resolve_timezone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone '{name}'") from exc


class ChartConfig(BaseModel):
    """Defaults for chart commands.

    Values are checked when the config is loaded, so a bad window or zone
    name fails at startup rather than halfway through a command.
    """

    time_delta: str = "24h"
    color_theme: str = "dark"
    timezone: str = "UTC"

    @field_validator("time_delta")
    @classmethod
    def check_time_delta(cls, value: str) -> str:
        parse_time_delta(value)
        return value

    @field_validator("color_theme")
    @classmethod
    def check_color_theme(cls, value: str) -> str:
        if value not in COLOR_THEMES:
            raise ValueError(f"color_theme must be one of {', '.join(COLOR_THEMES)}, got '{value}'")
        return value

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, value: str) -> str:
        _resolve_timezone(value)
        return value

    @property
    def time_delta_seconds(self) -> int:
        return parse_time_delta(self.time_delta)

    @property
    def tzinfo(self) -> tzinfo:
        """Timezone for axis labels."""
        return _resolve_timezone(self.timezone)


class PairscopeConfig(BaseModel):
    """Top-level configuration."""

    chart: ChartConfig = Field(default_factory=ChartConfig)
    colors: ChartColors = Field(default_factory=ChartColors)

    @classmethod
    def from_toml(cls, path: Path | str) -> PairscopeConfig:
        """Load configuration from a TOML file."""
        path = Path(path)
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return cls.model_validate(data)

    @classmethod
    def find_and_load(cls, explicit_path: str | None = None) -> PairscopeConfig | None:
        """Find and load config: explicit path > PAIRSCOPE_CONFIG env > pairscope.toml in cwd.

        Returns None if no config file is found.
        """
        if explicit_path:
            logger.info("Loading config from %s", explicit_path)
            return cls.from_toml(explicit_path)
        env_path = os.environ.get("PAIRSCOPE_CONFIG")
        if env_path:
            logger.info("Loading config from PAIRSCOPE_CONFIG=%s", env_path)
            return cls.from_toml(env_path)
        default = Path("pairscope.toml")
        if default.exists():
            logger.info("Loading config from %s", default)
            return cls.from_toml(default)
        return None
