"""
Core functionality for CS2 Crosshair.

This module contains the share code codec and the crosshair renderer.
"""

from cs2_crosshair.core.sharecode import decode, encode, is_valid_sharecode
from cs2_crosshair.core.renderer import render, render_image, CrosshairRenderer

__all__ = [
    "decode",
    "encode",
    "is_valid_sharecode",
    "render",
    "render_image",
    "CrosshairRenderer",
]
