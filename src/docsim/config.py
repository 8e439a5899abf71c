from __future__ import annotations

"""Comparison settings and their YAML loader."""

import codecs
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .utils.textio import DEFAULT_ENCODING


class ComparisonSettings(BaseModel):
    """Knobs for reading documents and presenting the score."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    encoding: str = DEFAULT_ENCODING
    decimals: int = Field(default=2, ge=0, le=10)
    clamp_negative: bool = False

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value


class SettingsNotFoundError(FileNotFoundError):
    """Raised when a settings file cannot be located."""


def load_settings(path: Optional[Path] = None) -> ComparisonSettings:
    """Load settings from a YAML file, or return the defaults when *path* is None."""

    if path is None:
        return ComparisonSettings()
    if not path.exists():
        raise SettingsNotFoundError(f"Settings file not found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings in {path} must be a mapping, got {type(data).__name__}")
    try:
        return ComparisonSettings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid settings in {path}: {exc}") from exc
