#!/usr/bin/env python3
"""
Crosshair Settings Model

The immutable crosshair configuration carried by a CS2 crosshair share code,
together with the colour preset and style enums and their lookup tables.
"""

import dataclasses
import math
from dataclasses import dataclass, asdict
from enum import IntEnum
from typing import Any, Dict, Tuple

from cs2_crosshair.errors import FieldOutOfRange


class ColorPreset(IntEnum):
    """Crosshair colour presets (cl_crosshaircolor)."""
    RED = 0
    GREEN = 1
    YELLOW = 2
    BLUE = 3
    CYAN = 4
    CUSTOM = 5  # Uses the explicit red/green/blue fields


class CrosshairStyle(IntEnum):
    """Crosshair styles (cl_crosshairstyle)."""
    DEFAULT = 0
    DEFAULT_STATIC = 1
    CLASSIC = 2
    CLASSIC_DYNAMIC = 3
    CLASSIC_STATIC = 4
    LEGACY = 5


# Built-in colours used by the game for each non-custom preset, indexed by preset
PRESET_COLORS: Tuple[Tuple[int, int, int], ...] = (
    (250, 50, 50),    # red
    (50, 250, 50),    # green
    (250, 250, 50),   # yellow
    (50, 50, 250),    # blue
    (50, 250, 250),   # cyan
)

SUPPORTED_FORMAT_VERSIONS = frozenset({1})


# ============================================================================
# FIELD LIMITS
# ============================================================================

# name -> (minimum, maximum, scale). Scale > 1 marks a fixed-point field whose
# value must be a multiple of 1/scale.
NUMERIC_FIELDS: Dict[str, Tuple[float, float, int]] = {
    'gap': (-12.8, 12.7, 10),
    'outline_thickness': (0.0, 3.0, 2),
    'red': (0, 255, 1),
    'green': (0, 255, 1),
    'blue': (0, 255, 1),
    'alpha': (0, 255, 1),
    'split_distance': (0, 127, 1),
    'fixed_crosshair_gap': (-12.8, 12.7, 10),
    'inner_split_alpha': (0.0, 1.0, 10),
    'outer_split_alpha': (0.0, 1.0, 10),
    'split_size_ratio': (0.0, 1.0, 10),
    'thickness': (0.0, 6.0, 10),
    'length': (0.0, 100.0, 10),
}

BOOLEAN_FIELDS = (
    'outline_enabled',
    'follow_recoil',
    'center_dot_enabled',
    'deployed_weapon_gap_enabled',
    'alpha_enabled',
    't_style_enabled',
)

ENUM_FIELDS = {
    'color': ColorPreset,
    'style': CrosshairStyle,
}

# Tolerance when checking that a fixed-point value lies on its grid
_GRID_TOLERANCE = 1e-6


def _normalize_numeric(name: str, value: Any) -> Any:
    minimum, maximum, scale = NUMERIC_FIELDS[name]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FieldOutOfRange(name, value)
    if not math.isfinite(value):
        raise FieldOutOfRange(name, value)

    scaled = value * scale
    steps = round(scaled)
    if abs(scaled - steps) > _GRID_TOLERANCE:
        raise FieldOutOfRange(name, value)

    normalized = steps if scale == 1 else steps / scale
    if not minimum <= normalized <= maximum:
        raise FieldOutOfRange(name, value)
    return normalized


def _normalize_enum(name: str, value: Any) -> IntEnum:
    enum_type = ENUM_FIELDS[name]
    if isinstance(value, str):
        try:
            return enum_type[value.upper()]
        except KeyError:
            raise FieldOutOfRange(name, value) from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise FieldOutOfRange(name, value)
    try:
        return enum_type(value)
    except ValueError:
        raise FieldOutOfRange(name, value) from None


@dataclass(frozen=True)
class CrosshairSettings:
    """A decoded crosshair configuration.

    Instances are validated on construction: every numeric field must lie
    within its range and, for fixed-point fields, on its grid. Invalid values
    raise FieldOutOfRange naming the offending field.
    """
    gap: float = 1.0
    outline_thickness: float = 1.0
    red: int = 50
    green: int = 250
    blue: int = 50
    alpha: int = 200
    split_distance: int = 7
    follow_recoil: bool = False
    fixed_crosshair_gap: float = 3.0
    color: ColorPreset = ColorPreset.GREEN
    outline_enabled: bool = False
    inner_split_alpha: float = 0.0
    outer_split_alpha: float = 1.0
    split_size_ratio: float = 1.0
    thickness: float = 0.5
    center_dot_enabled: bool = False
    deployed_weapon_gap_enabled: bool = True
    alpha_enabled: bool = True
    t_style_enabled: bool = False
    style: CrosshairStyle = CrosshairStyle.CLASSIC
    length: float = 5.0
    format_version: int = 1

    def __post_init__(self):
        for name in NUMERIC_FIELDS:
            object.__setattr__(self, name, _normalize_numeric(name, getattr(self, name)))

        for name in ENUM_FIELDS:
            object.__setattr__(self, name, _normalize_enum(name, getattr(self, name)))

        for name in BOOLEAN_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, (bool, int)) or value not in (0, 1):
                raise FieldOutOfRange(name, value)
            object.__setattr__(self, name, bool(value))

        version = self.format_version
        if isinstance(version, bool) or not isinstance(version, int) \
                or version not in SUPPORTED_FORMAT_VERSIONS:
            raise FieldOutOfRange('format_version', self.format_version)

    @property
    def inner_lines_enabled(self) -> bool:
        """Whether the four crosshair lines are drawn (dot-only mode otherwise)."""
        return self.length > 0

    def resolved_rgb(self) -> Tuple[int, int, int]:
        """Get the RGB colour the crosshair is drawn with.

        Returns:
            (R, G, B) from the preset table, or the explicit channels for CUSTOM
        """
        if self.color == ColorPreset.CUSTOM:
            return (self.red, self.green, self.blue)
        return PRESET_COLORS[self.color]

    def effective_alpha(self) -> int:
        """Get the opacity the crosshair is drawn with (0-255).

        The alpha channel only applies when alpha_enabled is set; otherwise the
        crosshair is fully opaque.
        """
        return self.alpha if self.alpha_enabled else 255

    def replace(self, **changes: Any) -> 'CrosshairSettings':
        """Return a copy with the given fields changed (and re-validated)."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        for name in ENUM_FIELDS:
            data[name] = int(data[name])
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CrosshairSettings':
        """Create CrosshairSettings from dictionary.

        Unknown keys are rejected; missing keys take their defaults.
        """
        known = {field.name for field in dataclasses.fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise FieldOutOfRange(sorted(unknown)[0])
        return cls(**data)
