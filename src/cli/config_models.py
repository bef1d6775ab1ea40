"""Pydantic configuration models for mood-weather."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from shared_types import MoodLabel


class PathsConfig(BaseModel):
    """File paths configuration."""

    entries_file: Path = Path("~/.moodweather/entries.json")
    export_dir: Path = Path("~/.moodweather/exports")
    log_file: Optional[Path] = None

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.entries_file = self.entries_file.expanduser()
        self.export_dir = self.export_dir.expanduser()
        if self.log_file:
            self.log_file = self.log_file.expanduser()
        return self


class ChartConfig(BaseModel):
    """Trend chart defaults."""

    window_days: int = 7
    timezone: str | None = None  # IANA name, None = system local
    trend_threshold: float = 0.05

    @field_validator("window_days")
    @classmethod
    def validate_window(cls, v: int) -> int:
        if not 1 <= v <= 366:
            raise ValueError(f"window_days must be 1-366, got {v}")
        return v


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    json_mode: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class EntryConfig(BaseModel):
    """Defaults for new entries."""

    default_intensity: int = 50
    default_label: MoodLabel = MoodLabel.CLOUDY

    @field_validator("default_intensity")
    @classmethod
    def validate_intensity(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError(f"default_intensity must be 0-100, got {v}")
        return v


class MoodConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    chart: ChartConfig = Field(default_factory=ChartConfig)
    entries: EntryConfig = Field(default_factory=EntryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "MoodConfig":
        """Create config from dict (paths may be plain strings)."""
        if "paths" in data and isinstance(data["paths"], dict):
            for key, value in data["paths"].items():
                if isinstance(value, str):
                    data["paths"][key] = Path(value)
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")
