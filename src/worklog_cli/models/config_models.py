"""Configuration models for Worklog CLI."""

from __future__ import annotations

from datetime import time

from pydantic import BaseModel, Field, field_validator

from worklog_cli.utils.dates import DEFAULT_DAY_CHANGE_THRESHOLD


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="table")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ("table", "json", "yaml"):
            raise ValueError(f"Unsupported output format: {v}")
        return v


class AppConfig(BaseModel):
    """Main configuration.

    Attributes:
        data_path: SQLite database file
        day_change_threshold: Time of day before which the previous calendar
            day is still the current work day; unset means noon
        output: Output preferences
    """

    data_path: str
    day_change_threshold: time | None = Field(default=None)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("day_change_threshold")
    @classmethod
    def strip_offset(cls, v: time | None) -> time | None:
        # Compared against naive local times
        if v is not None and v.tzinfo is not None:
            return v.replace(tzinfo=None)
        return v

    def effective_day_change_threshold(self) -> time:
        return self.day_change_threshold or DEFAULT_DAY_CHANGE_THRESHOLD
