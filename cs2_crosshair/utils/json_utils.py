#!/usr/bin/env python3
"""
JSON Utilities for CS2 Crosshair

JSON file I/O for service settings and decoded crosshair dumps, with
consistent error handling and logging.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


def load_json(file_path: Path,
              default: Any = None,
              create_if_missing: bool = False,
              custom_logger: Optional[logging.Logger] = None) -> Any:
    """
    Load data from a JSON file.

    Args:
        file_path: Path to JSON file
        default: Value returned when the file is missing or unreadable
        create_if_missing: If True, write default to the file when it is missing
        custom_logger: Optional custom logger to use

    Returns:
        Loaded data or default value
    """
    log = custom_logger or logger

    if not file_path.exists():
        if create_if_missing and default is not None:
            save_json(file_path, default, custom_logger=custom_logger)
        else:
            log.info(f"JSON file not found: {file_path}, using default value")
        return default

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        log.debug(f"Loaded JSON from {file_path}")
        return data

    except json.JSONDecodeError as e:
        log.error(f"Invalid JSON in {file_path}: {e}")
        return default

    except OSError as e:
        log.error(f"Error loading JSON from {file_path}: {e}")
        return default


def save_json(file_path: Path,
              data: Any,
              indent: int = 2,
              custom_logger: Optional[logging.Logger] = None) -> bool:
    """
    Save data to a JSON file, creating parent directories as needed.

    Args:
        file_path: Path to JSON file
        data: JSON-serializable data
        indent: Indentation level for pretty printing
        custom_logger: Optional custom logger to use

    Returns:
        True if saved successfully, False otherwise
    """
    log = custom_logger or logger

    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=indent)

        log.debug(f"Saved JSON to {file_path}")
        return True

    except TypeError as e:
        log.error(f"Data is not JSON-serializable: {e}")
        return False

    except OSError as e:
        log.error(f"Error saving JSON to {file_path}: {e}")
        return False


def dumps(data: Any, indent: int = 2) -> str:
    """Serialize data to a JSON string with stable key order."""
    return json.dumps(data, indent=indent, sort_keys=True)
