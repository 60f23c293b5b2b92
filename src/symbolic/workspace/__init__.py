# Copyright 2026 Symbolic Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project settings for Symbolic."""

from symbolic.workspace.config import (
    SETTINGS_FILE_NAME,
    Settings,
    SettingsError,
    find_settings,
    load_settings,
)

__all__ = [
    "SETTINGS_FILE_NAME",
    "Settings",
    "SettingsError",
    "find_settings",
    "load_settings",
]
