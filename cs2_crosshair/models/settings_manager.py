#!/usr/bin/env python3
"""
Settings Manager for CS2 Crosshair

Manages service settings (canvas size, cache location and lifetime, input
limits, logging) and their persistence.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

from cs2_crosshair.utils.json_utils import load_json, save_json

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when configuration is invalid or missing"""
    pass


class SettingsManager:
    """Manages service settings and configuration."""

    DEFAULTS: Dict[str, Any] = {
        'canvas_size': 64,
        'cache_directory': 'cache',
        'cache_duration_seconds': 3 * 60 * 60,
        'max_code_length': 45,
        'log_level': 'INFO',
    }

    def __init__(self, settings_dir: Union[str, Path] = "settings"):
        """Initialize the settings manager.

        Args:
            settings_dir: Directory to store settings files
        """
        self.settings_dir = Path(settings_dir)
        self.settings_file = self.settings_dir / "app_settings.json"
        self.settings: Dict[str, Any] = {}

        self.load_settings()

    def load_settings(self) -> None:
        """Load settings from JSON file, writing the defaults if none exist."""
        loaded = load_json(self.settings_file, default=dict(self.DEFAULTS),
                           create_if_missing=True, custom_logger=logger)

        if not isinstance(loaded, dict):
            logger.error(f"Settings file {self.settings_file} does not hold an object, using defaults")
            loaded = {}

        # Merge with defaults to ensure all keys exist
        self.settings = dict(self.DEFAULTS)
        self.settings.update(loaded)

    def save_settings(self) -> bool:
        """Save settings to JSON file.

        Returns:
            True if saved successfully, False otherwise
        """
        return save_json(self.settings_file, self.settings, custom_logger=logger)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value.

        Args:
            key: Setting key
            default: Default value if key doesn't exist

        Returns:
            Setting value or default
        """
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> bool:
        """Set a setting value and save.

        Args:
            key: Setting key
            value: Setting value

        Returns:
            True if saved successfully, False otherwise
        """
        self.settings[key] = value
        return self.save_settings()

    def get_canvas_size(self) -> int:
        """Get the render canvas size in pixels.

        Raises:
            ConfigurationError: If the configured size cannot be rendered
        """
        from cs2_crosshair.core.renderer import validate_canvas_size
        from cs2_crosshair.errors import InvalidCanvasSize

        value = self.get('canvas_size')
        try:
            return validate_canvas_size(value)
        except InvalidCanvasSize as e:
            raise ConfigurationError(f"Invalid canvas_size setting: {e}") from e

    def get_cache_directory(self) -> Path:
        """Get the render cache directory."""
        value = self.get('cache_directory')
        if not isinstance(value, str) or not value:
            raise ConfigurationError(f"Invalid cache_directory setting: {value!r}")
        return Path(value)

    def get_cache_duration(self) -> float:
        """Get the render cache time to live in seconds."""
        value = self.get('cache_duration_seconds')
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ConfigurationError(f"Invalid cache_duration_seconds setting: {value!r}")
        return float(value)

    def get_max_code_length(self) -> int:
        """Get the maximum accepted identifier length."""
        value = self.get('max_code_length')
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ConfigurationError(f"Invalid max_code_length setting: {value!r}")
        return value

    def get_log_level(self) -> int:
        """Get the logging level as a logging module constant."""
        value = self.get('log_level')
        level = logging.getLevelName(str(value).upper())
        if not isinstance(level, int):
            raise ConfigurationError(f"Invalid log_level setting: {value!r}")
        return level

    def create_render_cache(self):
        """Build a RenderCache from the configured directory, lifetime and size."""
        from cs2_crosshair.utils.render_cache import RenderCache

        return RenderCache(
            directory=self.get_cache_directory(),
            ttl_seconds=self.get_cache_duration(),
            canvas_size=self.get_canvas_size(),
        )
