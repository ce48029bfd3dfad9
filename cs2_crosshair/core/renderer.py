#!/usr/bin/env python3
"""
CS2 Crosshair Renderer

Rasterizes CrosshairSettings into a square RGBA preview image.

Geometry, in canvas pixels, around the centre (size / 2, size / 2):
- each line starts (BASE_GAP + gap) * PIXELS_PER_UNIT from the centre and is
  length * PIXELS_PER_UNIT long
- line width and centre dot size are max(thickness * PIXELS_PER_UNIT, 1)
- the outline grows every shape by outline_thickness * PIXELS_PER_UNIT per side

All shapes are axis-aligned rectangles. They are rasterized on a grid
SUPERSAMPLE times finer than the canvas and box-filtered down with integer
arithmetic in premultiplied alpha, so the output is bit-identical for
identical input on every platform.
"""

import math
from typing import List, Optional, Tuple

import numpy as np
from PIL import Image

from cs2_crosshair.errors import InvalidCanvasSize
from cs2_crosshair.core.sharecode import decode
from cs2_crosshair.models.crosshair_settings import CrosshairSettings
from cs2_crosshair.utils.image_utils import encode_png


# ============================================================================
# CONSTANTS
# ============================================================================

PIXELS_PER_UNIT = 2.0
BASE_GAP = 4.0  # Separation the game keeps between centre and lines at gap 0
MIN_LINE_WIDTH = 1.0
SUPERSAMPLE = 4
MAX_CANVAS_SIZE = 2048
DEFAULT_CANVAS_SIZE = 64

# x0, y0, x1, y1 in canvas pixels
Rect = Tuple[float, float, float, float]


# ============================================================================
# GEOMETRY
# ============================================================================

def crosshair_rects(settings: CrosshairSettings, center: float) -> List[Rect]:
    """
    Compute the filled rectangles of a crosshair.

    Args:
        settings: Crosshair to lay out
        center: Canvas centre coordinate (same on both axes)

    Returns:
        Rectangles for the bottom, left, right and (unless T-style) top lines,
        followed by the centre dot when enabled
    """
    width = max(settings.thickness * PIXELS_PER_UNIT, MIN_LINE_WIDTH)
    half = width / 2
    inner = (BASE_GAP + settings.gap) * PIXELS_PER_UNIT
    outer = inner + settings.length * PIXELS_PER_UNIT

    rects = []
    if settings.inner_lines_enabled:
        rects.append((center - half, center + inner, center + half, center + outer))
        rects.append((center - outer, center - half, center - inner, center + half))
        rects.append((center + inner, center - half, center + outer, center + half))
        if not settings.t_style_enabled:
            rects.append((center - half, center - outer, center + half, center - inner))

    if settings.center_dot_enabled:
        rects.append((center - half, center - half, center + half, center + half))

    return rects


def outline_rects(rects: List[Rect], settings: CrosshairSettings) -> List[Rect]:
    """Grow each rectangle by the outline thickness (empty if outlines are off)."""
    if not settings.outline_enabled:
        return []
    grow = settings.outline_thickness * PIXELS_PER_UNIT
    return [(x0 - grow, y0 - grow, x1 + grow, y1 + grow) for x0, y0, x1, y1 in rects]


def _pixel_window(rects: List[Rect], size: int) -> Optional[Tuple[int, int, int, int]]:
    """Integer pixel bounds covering all rectangles, clipped to the canvas."""
    if not rects:
        return None
    x0 = max(0, math.floor(min(r[0] for r in rects)))
    y0 = max(0, math.floor(min(r[1] for r in rects)))
    x1 = min(size, math.ceil(max(r[2] for r in rects)))
    y1 = min(size, math.ceil(max(r[3] for r in rects)))
    if x0 >= x1 or y0 >= y1:
        return None
    return x0, y0, x1, y1


def _to_subpixel(value: float, origin: int, limit: int) -> int:
    return min(max(math.floor((value - origin) * SUPERSAMPLE + 0.5), 0), limit)


def _rasterize(rects: List[Rect], window: Tuple[int, int, int, int]) -> np.ndarray:
    """Boolean coverage mask of the rectangles on the supersampled window."""
    x0, y0, x1, y1 = window
    width, height = (x1 - x0) * SUPERSAMPLE, (y1 - y0) * SUPERSAMPLE
    mask = np.zeros((height, width), dtype=bool)
    for rx0, ry0, rx1, ry1 in rects:
        left = _to_subpixel(rx0, x0, width)
        right = _to_subpixel(rx1, x0, width)
        top = _to_subpixel(ry0, y0, height)
        bottom = _to_subpixel(ry1, y0, height)
        if left < right and top < bottom:
            mask[top:bottom, left:right] = True
    return mask


def _block_counts(mask: np.ndarray) -> np.ndarray:
    """Number of covered subpixels inside every canvas pixel."""
    height, width = mask.shape[0] // SUPERSAMPLE, mask.shape[1] // SUPERSAMPLE
    blocks = mask.reshape(height, SUPERSAMPLE, width, SUPERSAMPLE)
    return blocks.sum(axis=(1, 3), dtype=np.int64)


# ============================================================================
# COMPOSITING
# ============================================================================

def _composite(fill: np.ndarray, outline: np.ndarray,
               rgb: Tuple[int, int, int], alpha: int) -> np.ndarray:
    """
    Composite the fill over the outline and box-filter to canvas pixels.

    Per subpixel, alpha is kept as a * 255 and colour premultiplied as c * a,
    both in units of 1/65025, so the "over" operator stays integral:
    fill over outline has alpha a*255 + a*(255 - a) and colour c*a (the
    outline is black).
    """
    fill_over_outline = _block_counts(fill & outline)
    fill_only = _block_counts(fill & ~outline)
    outline_only = _block_counts(outline & ~fill)

    alpha_fill = alpha * 255
    alpha_both = alpha * 255 + alpha * (255 - alpha)
    alpha_outline = alpha * 255

    sum_alpha = (fill_over_outline * alpha_both
                 + fill_only * alpha_fill
                 + outline_only * alpha_outline)
    fill_coverage = fill_over_outline + fill_only

    samples = SUPERSAMPLE * SUPERSAMPLE
    divisor = 255 * samples
    out_alpha = (2 * sum_alpha + divisor) // (2 * divisor)

    height, width = sum_alpha.shape
    out = np.zeros((height, width, 4), dtype=np.uint8)
    covered = sum_alpha > 0
    safe_alpha = np.where(covered, sum_alpha, 1)
    for channel, value in enumerate(rgb):
        premultiplied = fill_coverage * (value * alpha)
        straight = (2 * 255 * premultiplied + safe_alpha) // (2 * safe_alpha)
        out[..., channel] = np.where(covered, np.minimum(straight, 255), 0)
    out[..., 3] = np.minimum(out_alpha, 255)
    return out


# ============================================================================
# RENDERING
# ============================================================================

def validate_canvas_size(canvas_size) -> int:
    """Check a canvas size and return it, raising InvalidCanvasSize otherwise."""
    if isinstance(canvas_size, bool) or not isinstance(canvas_size, int):
        raise InvalidCanvasSize(canvas_size, MAX_CANVAS_SIZE)
    if not 1 <= canvas_size <= MAX_CANVAS_SIZE:
        raise InvalidCanvasSize(canvas_size, MAX_CANVAS_SIZE)
    return canvas_size


def render_image(settings: CrosshairSettings, canvas_size: int) -> Image.Image:
    """
    Render a crosshair into an RGBA image.

    Args:
        settings: Crosshair to draw
        canvas_size: Width and height of the output in pixels (1-2048)

    Returns:
        canvas_size x canvas_size RGBA image, transparent outside the crosshair

    Raises:
        InvalidCanvasSize: If canvas_size is not an integer in range
    """
    size = validate_canvas_size(canvas_size)
    center = size / 2

    fill_rects = crosshair_rects(settings, center)
    border_rects = outline_rects(fill_rects, settings)

    pixels = np.zeros((size, size, 4), dtype=np.uint8)
    window = _pixel_window(fill_rects + border_rects, size)
    if window is not None:
        fill = _rasterize(fill_rects, window)
        outline = _rasterize(border_rects, window)
        x0, y0, x1, y1 = window
        pixels[y0:y1, x0:x1] = _composite(
            fill, outline, settings.resolved_rgb(), settings.effective_alpha()
        )

    return Image.fromarray(pixels)


def render(settings: CrosshairSettings, canvas_size: int) -> bytes:
    """
    Render a crosshair as a PNG image.

    Args:
        settings: Crosshair to draw
        canvas_size: Width and height of the output in pixels (1-2048)

    Returns:
        PNG file contents

    Raises:
        InvalidCanvasSize: If canvas_size is not an integer in range
    """
    return encode_png(render_image(settings, canvas_size))


class CrosshairRenderer:
    """Renders crosshairs at a fixed canvas size."""

    def __init__(self, canvas_size: int = DEFAULT_CANVAS_SIZE):
        """Initialize the renderer.

        Args:
            canvas_size: Output width and height in pixels
        """
        self.canvas_size = validate_canvas_size(canvas_size)

    def render(self, settings: CrosshairSettings) -> bytes:
        """Render settings to PNG bytes."""
        return render(settings, self.canvas_size)

    def render_code(self, code: str) -> bytes:
        """Decode a share code and render it to PNG bytes."""
        return render(decode(code), self.canvas_size)
