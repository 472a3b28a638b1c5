"""Configuration models for pydevfile."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class PydevfileSettings(BaseModel):
    """Parser and writer settings."""

    devfile_name: str = Field(
        default="devfile.yaml",
        description="Devfile read from the project directory when no path is given",
    )
    log_level: LogLevel = Field(default="INFO", description="Logging level for the CLI")
    substitute_variables: bool = Field(
        default=True, description="Replace {{variable}} references when parsing"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value


class PydevfileConfig(BaseModel):
    """Root configuration model."""

    version: int = Field(default=1)
    settings: PydevfileSettings = Field(default_factory=PydevfileSettings)
