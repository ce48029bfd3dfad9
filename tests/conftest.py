import logging

import pytest

from cs2_crosshair.core.sharecode import bytes_to_sharecode, sharecode_to_bytes
from cs2_crosshair.models.crosshair_settings import ColorPreset, CrosshairSettings, CrosshairStyle

logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Real share code exported from the game
VALID_CODE = 'CSGO-O4Jsi-V36wY-rTMGK-9w7qF-jQ8WB'

# Example code from the service usage text; its checksum byte does not match
USAGE_EXAMPLE_CODE = 'CSGO-AJswe-2jNcK-nMpEQ-rHV5J-5JWAB'


def code_from_payload(payload) -> str:
    """Build a share code from a payload, fixing up its checksum."""
    payload = bytearray(payload)
    payload[0] = sum(payload[1:]) % 256
    return bytes_to_sharecode(bytes(payload))


def valid_payload() -> bytearray:
    return bytearray(sharecode_to_bytes(VALID_CODE))


@pytest.fixture
def valid_code():
    return VALID_CODE


@pytest.fixture
def plain_settings():
    """Opaque green cross: 2px wide lines from 10px to 20px around the centre."""
    return CrosshairSettings(
        gap=1.0,
        thickness=1.0,
        length=5.0,
        color=ColorPreset.GREEN,
        alpha=255,
        alpha_enabled=False,
        outline_enabled=False,
        outline_thickness=1.0,
        center_dot_enabled=False,
        t_style_enabled=False,
        style=CrosshairStyle.CLASSIC_STATIC,
    )
