from PIL import Image

from cs2_crosshair.utils.image_utils import (
    decode_png,
    encode_png,
    ensure_image_mode,
    get_pixel_rgb,
    is_png,
    opaque_bbox,
)
from cs2_crosshair.utils.json_utils import dumps, load_json, save_json

import pytest


def test_png_encoding_is_stable():
    image = Image.new('RGBA', (8, 8), (10, 20, 30, 255))
    assert encode_png(image) == encode_png(image.copy())
    assert is_png(encode_png(image))


def test_decode_png_converts_mode():
    data = encode_png(Image.new('RGB', (4, 4), (1, 2, 3)))
    image = decode_png(data)
    assert image.mode == 'RGBA'
    assert image.getpixel((0, 0)) == (1, 2, 3, 255)


def test_decode_png_rejects_other_data():
    with pytest.raises(ValueError):
        decode_png(b"GIF89a")


def test_ensure_image_mode_keeps_matching_image():
    image = Image.new('RGBA', (2, 2))
    assert ensure_image_mode(image, 'RGBA') is image
    assert ensure_image_mode(image, 'RGB').mode == 'RGB'


def test_get_pixel_rgb():
    image = Image.new('RGBA', (2, 1), (0, 0, 0, 0))
    image.putpixel((1, 0), (5, 6, 7, 255))

    assert get_pixel_rgb(image, 0, 0) is None
    assert get_pixel_rgb(image, 0, 0, check_alpha=False) == (0, 0, 0)
    assert get_pixel_rgb(image, 1, 0) == (5, 6, 7)
    assert get_pixel_rgb(image, 5, 5) is None
    assert get_pixel_rgb(Image.new('L', (1, 1), 9), 0, 0) == (9, 9, 9)


def test_opaque_bbox():
    image = Image.new('RGBA', (10, 10), (0, 0, 0, 0))
    assert opaque_bbox(image) is None
    image.putpixel((3, 4), (255, 255, 255, 1))
    assert opaque_bbox(image) == (3, 4, 4, 5)


def test_json_round_trip(tmp_path):
    path = tmp_path / "nested" / "data.json"
    assert save_json(path, {'b': 1, 'a': [1, 2]})
    assert load_json(path) == {'b': 1, 'a': [1, 2]}


def test_load_json_missing_and_invalid(tmp_path):
    missing = tmp_path / "missing.json"
    assert load_json(missing, default={}) == {}
    assert not missing.exists()

    assert load_json(missing, default={'x': 1}, create_if_missing=True) == {'x': 1}
    assert missing.exists()

    broken = tmp_path / "broken.json"
    broken.write_text("[1,")
    assert load_json(broken, default=None) is None


def test_save_json_rejects_unserializable(tmp_path):
    assert not save_json(tmp_path / "bad.json", {'x': object()})


def test_dumps_sorts_keys():
    assert dumps({'b': 1, 'a': 2}, indent=None) == '{"a": 2, "b": 1}'
