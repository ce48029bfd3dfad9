"""
Utility functions for CS2 Crosshair.

This module contains image and JSON helpers.
"""

from cs2_crosshair.utils.image_utils import encode_png, decode_png, is_png
from cs2_crosshair.utils.json_utils import load_json, save_json
# RenderCache and classify_identifier are imported from their modules directly

__all__ = [
    'encode_png',
    'decode_png',
    'is_png',
    'load_json',
    'save_json',
]
