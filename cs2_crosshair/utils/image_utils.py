#!/usr/bin/env python3
"""
Image Utilities for CS2 Crosshair

PNG encoding/decoding and pixel inspection helpers shared by the renderer,
the render cache and the command line tools.
"""

import io
import logging
from typing import Optional, Tuple

from PIL import Image

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'


# ============================================================================
# PNG ENCODING
# ============================================================================

def encode_png(image: Image.Image) -> bytes:
    """
    Encode an image as PNG.

    Pillow writes no timestamps or other per-call metadata, so identical
    pixels always produce identical bytes.

    Args:
        image: PIL Image to encode

    Returns:
        PNG file contents
    """
    buffer = io.BytesIO()
    image.save(buffer, format='PNG')
    return buffer.getvalue()


def decode_png(data: bytes, target_mode: str = 'RGBA') -> Image.Image:
    """
    Decode PNG bytes into a PIL Image.

    Args:
        data: PNG file contents
        target_mode: Target PIL image mode

    Returns:
        Fully loaded image in the target mode

    Raises:
        ValueError: If the data is not a PNG image
    """
    if not is_png(data):
        raise ValueError("Data is not a PNG image")

    image = Image.open(io.BytesIO(data))
    image.load()
    return ensure_image_mode(image, target_mode)


def is_png(data: bytes) -> bool:
    """Check whether data starts with the PNG signature."""
    return data[:len(PNG_SIGNATURE)] == PNG_SIGNATURE


# ============================================================================
# IMAGE MODE CONVERSION
# ============================================================================

def ensure_image_mode(image: Image.Image, target_mode: str = 'RGBA') -> Image.Image:
    """
    Ensure a PIL Image is in the specified mode.

    Args:
        image: PIL Image to convert
        target_mode: Target mode ('RGB', 'RGBA', 'L', etc.)

    Returns:
        Image in the target mode (may be the same object if already correct)
    """
    if image.mode == target_mode:
        return image

    return image.convert(target_mode)


# ============================================================================
# PIXEL INSPECTION
# ============================================================================

def get_pixel_rgb(image: Image.Image,
                  x: int, y: int,
                  check_alpha: bool = True,
                  alpha_threshold: int = 128) -> Optional[Tuple[int, int, int]]:
    """
    Get the RGB color of a pixel, handling different image modes.

    Args:
        image: PIL Image
        x: X coordinate
        y: Y coordinate
        check_alpha: If True, return None for transparent pixels
        alpha_threshold: Alpha value below which pixel is considered transparent

    Returns:
        (R, G, B) tuple or None if pixel is transparent/invalid
    """
    try:
        pixel = image.getpixel((x, y))
    except IndexError:
        logger.warning(f"Pixel coordinates ({x}, {y}) out of bounds for image size {image.size}")
        return None

    if isinstance(pixel, int):
        return (pixel, pixel, pixel)

    if len(pixel) == 3:
        return tuple(pixel)

    if len(pixel) == 4:
        r, g, b, a = pixel
        if check_alpha and a < alpha_threshold:
            return None
        return (r, g, b)

    logger.warning(f"Unexpected pixel format: {pixel}")
    return None


def get_pixel_alpha(image: Image.Image, x: int, y: int) -> int:
    """Get the alpha of a pixel (255 for images without an alpha channel)."""
    pixel = image.getpixel((x, y))
    if isinstance(pixel, tuple) and len(pixel) == 4:
        return pixel[3]
    return 255


def opaque_bbox(image: Image.Image) -> Optional[Tuple[int, int, int, int]]:
    """
    Bounding box of all pixels that are not fully transparent.

    Returns:
        (left, top, right, bottom) or None for a fully transparent image
    """
    return ensure_image_mode(image, 'RGBA').getchannel('A').getbbox()
