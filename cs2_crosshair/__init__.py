"""
CS2 Crosshair - Share Code Decoder & Preview Renderer

Decodes CS2 crosshair share codes into crosshair settings and renders them
into deterministic PNG previews.
"""

__version__ = "1.0.0"
__author__ = "CS2 Crosshair Team"

from cs2_crosshair.errors import (
    CrosshairError,
    DecodeError,
    MalformedCode,
    ChecksumMismatch,
    UnsupportedVersion,
    FieldOutOfRange,
    RenderError,
    InvalidCanvasSize,
)
from cs2_crosshair.models.crosshair_settings import (
    CrosshairSettings,
    ColorPreset,
    CrosshairStyle,
)
from cs2_crosshair.core.sharecode import decode, encode, is_valid_sharecode
from cs2_crosshair.core.renderer import render, render_image, CrosshairRenderer

__all__ = [
    "decode",
    "encode",
    "is_valid_sharecode",
    "render",
    "render_image",
    "CrosshairRenderer",
    "CrosshairSettings",
    "ColorPreset",
    "CrosshairStyle",
    "CrosshairError",
    "DecodeError",
    "MalformedCode",
    "ChecksumMismatch",
    "UnsupportedVersion",
    "FieldOutOfRange",
    "RenderError",
    "InvalidCanvasSize",
]
