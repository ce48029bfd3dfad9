"""
Data models for CS2 Crosshair.

This module contains:
- The crosshair settings record and its enums
- Service settings management
"""

from cs2_crosshair.models.crosshair_settings import (
    CrosshairSettings,
    ColorPreset,
    CrosshairStyle,
    PRESET_COLORS,
)
from cs2_crosshair.models.settings_manager import SettingsManager, ConfigurationError

__all__ = [
    "CrosshairSettings",
    "ColorPreset",
    "CrosshairStyle",
    "PRESET_COLORS",
    "SettingsManager",
    "ConfigurationError",
]
