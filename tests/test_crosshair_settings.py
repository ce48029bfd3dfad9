import dataclasses
import json

import pytest

from cs2_crosshair.errors import FieldOutOfRange
from cs2_crosshair.models.crosshair_settings import (
    PRESET_COLORS,
    ColorPreset,
    CrosshairSettings,
    CrosshairStyle,
)


def test_defaults_are_valid():
    settings = CrosshairSettings()
    assert settings.format_version == 1
    assert settings.color == ColorPreset.GREEN


def test_settings_are_immutable():
    settings = CrosshairSettings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.gap = 2.0


@pytest.mark.parametrize("field, value", [
    ('thickness', 6.1),
    ('thickness', -0.1),
    ('gap', 13.0),
    ('gap', -12.9),
    ('length', 100.1),
    ('outline_thickness', 3.5),
    ('red', 256),
    ('alpha', -1),
    ('split_distance', 128),
    ('inner_split_alpha', 1.1),
    ('alpha', 'opaque'),
    ('red', None),
    ('red', True),
    ('color', 9),
    ('color', 'magenta'),
    ('style', -1),
    ('outline_enabled', 2),
    ('center_dot_enabled', 'yes'),
    ('format_version', 2),
])
def test_out_of_range_values_name_the_field(field, value):
    with pytest.raises(FieldOutOfRange) as excinfo:
        CrosshairSettings(**{field: value})
    assert excinfo.value.field == field


@pytest.mark.parametrize("field, value", [
    ('thickness', 0.55),
    ('gap', 1.25),
    ('outline_thickness', 0.25),
    ('red', 10.5),
])
def test_values_off_the_fixed_point_grid_are_rejected(field, value):
    with pytest.raises(FieldOutOfRange):
        CrosshairSettings(**{field: value})


def test_values_are_normalized_onto_the_grid():
    settings = CrosshairSettings(thickness=0.1 * 3, outline_thickness=0.5, red=50.0)
    assert settings.thickness == 0.3
    assert settings.outline_thickness == 0.5
    assert settings.red == 50
    assert isinstance(settings.red, int)


def test_enum_fields_accept_ints_and_names():
    settings = CrosshairSettings(color=5, style='classic_static')
    assert settings.color is ColorPreset.CUSTOM
    assert settings.style is CrosshairStyle.CLASSIC_STATIC


def test_boolean_fields_accept_zero_and_one():
    settings = CrosshairSettings(outline_enabled=1, follow_recoil=0)
    assert settings.outline_enabled is True
    assert settings.follow_recoil is False


@pytest.mark.parametrize("preset", [p for p in ColorPreset if p != ColorPreset.CUSTOM])
def test_preset_colors(preset):
    settings = CrosshairSettings(color=preset, red=1, green=2, blue=3)
    assert settings.resolved_rgb() == PRESET_COLORS[preset]


def test_custom_color_uses_explicit_channels():
    settings = CrosshairSettings(color=ColorPreset.CUSTOM, red=1, green=2, blue=3)
    assert settings.resolved_rgb() == (1, 2, 3)


def test_alpha_only_applies_when_enabled():
    assert CrosshairSettings(alpha=80, alpha_enabled=True).effective_alpha() == 80
    assert CrosshairSettings(alpha=80, alpha_enabled=False).effective_alpha() == 255


def test_inner_lines_follow_length():
    assert CrosshairSettings(length=0.1).inner_lines_enabled
    assert not CrosshairSettings(length=0.0).inner_lines_enabled


def test_replace_revalidates():
    settings = CrosshairSettings()
    assert settings.replace(gap=-3.0).gap == -3.0
    with pytest.raises(FieldOutOfRange):
        settings.replace(thickness=7.0)


def test_dict_round_trip_is_json_friendly():
    settings = CrosshairSettings(color=ColorPreset.YELLOW, style=CrosshairStyle.LEGACY, gap=-2.5)
    data = settings.to_dict()

    assert data['color'] == 2
    assert data['style'] == 5
    assert CrosshairSettings.from_dict(json.loads(json.dumps(data))) == settings


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(FieldOutOfRange) as excinfo:
        CrosshairSettings.from_dict({'gap': 1.0, 'size': 3})
    assert excinfo.value.field == 'size'


@pytest.mark.parametrize("field", ['gap', 'thickness', 'length', 'red', 'alpha'])
@pytest.mark.parametrize("value", [float('inf'), float('-inf'), float('nan')])
def test_non_finite_values_are_rejected(field, value):
    with pytest.raises(FieldOutOfRange) as excinfo:
        CrosshairSettings(**{field: value})
    assert excinfo.value.field == field


@pytest.mark.parametrize("text", ['{"gap": Infinity}', '{"length": -Infinity}', '{"thickness": NaN}'])
def test_from_dict_rejects_non_finite_json_numbers(text):
    with pytest.raises(FieldOutOfRange):
        CrosshairSettings.from_dict(json.loads(text))


@pytest.mark.parametrize("version", [1.0, True, '1', None])
def test_format_version_must_be_an_integer(version):
    with pytest.raises(FieldOutOfRange) as excinfo:
        CrosshairSettings(format_version=version)
    assert excinfo.value.field == 'format_version'


def test_format_version_stays_a_plain_int():
    settings = CrosshairSettings.from_dict({'format_version': 1})
    assert type(settings.format_version) is int
    assert type(settings.to_dict()['format_version']) is int
