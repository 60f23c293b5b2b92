# Copyright 2026 Symbolic Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the per-project settings file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from symbolic.pipeline.config import OptimizerConfig

# ###############
# Public Interface
# ###############

SETTINGS_FILE_NAME = ".symbolic.yaml"


class SettingsError(Exception):
    """Raised when a settings file is invalid or cannot be loaded."""


class Settings(BaseModel):
    """Project-level defaults for the Symbolic front-end.

    Attributes:
        optimizer: Optimization passes; the only place they can be enabled.
        log_level: Name of the standard logging level for diagnostics.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    optimizer: OptimizerConfig = Field(default_factory=OptimizerConfig)
    log_level: str = Field(alias="log-level", default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_settings(path: Path) -> Settings:
    """Load and validate a settings file.

    An empty file is treated as all defaults.

    Args:
        path: Path to the `.symbolic.yaml` file.

    Returns:
        A validated Settings instance.

    Raises:
        SettingsError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SettingsError(f"Settings file not found: {path}") from None
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in settings file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsError(f"{path}: settings must be a YAML mapping")

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings file '{path}': {exc}") from exc


def find_settings(directory: Path) -> Settings:
    """Load the settings file in *directory*, or return defaults if there is none."""
    path = directory / SETTINGS_FILE_NAME
    if not path.exists():
        return Settings()
    return load_settings(path)
