#!/usr/bin/env python3
"""
CS2 Crosshair Share Code Codec

Converts between crosshair share codes (e.g. CSGO-O4Jsi-V36wY-rTMGK-9w7qF-jQ8WB)
and CrosshairSettings.

A share code is 25 symbols of a 57 character dictionary. Read last symbol
first, they form one integer that is stored as an 18 byte big-endian payload:

- byte 0: checksum, sum(payload[1:]) % 256
- byte 1: format version
- bytes 2-15: crosshair fields, addressed by bit offset (bit 8*k + s is
  bit s of payload[k])
- remaining bits: reserved, always zero
"""

import re
from typing import NamedTuple, Tuple

from cs2_crosshair.errors import (
    ChecksumMismatch,
    FieldOutOfRange,
    MalformedCode,
    UnsupportedVersion,
)
from cs2_crosshair.models.crosshair_settings import (
    CrosshairSettings,
    SUPPORTED_FORMAT_VERSIONS,
)


# ============================================================================
# CONSTANTS
# ============================================================================

DICTIONARY = 'ABCDEFGHJKLMNOPQRSTUVWXYZabcdefhijkmnopqrstuvwxyz23456789'
DICTIONARY_LENGTH = len(DICTIONARY)
CODE_PREFIX = 'CSGO'
CODE_PATTERN = re.compile(r'CSGO(-[%s]{5}){5}' % DICTIONARY)

SYMBOL_COUNT = 25
PAYLOAD_SIZE = 18
PAYLOAD_BITS = PAYLOAD_SIZE * 8

_SYMBOL_VALUES = {symbol: index for index, symbol in enumerate(DICTIONARY)}


class BitField(NamedTuple):
    """Location and fixed-point encoding of one payload field."""
    name: str
    offset: int  # Bit offset inside the payload
    width: int  # Width in bits
    scale: int = 1  # Stored value = field value * scale
    signed: bool = False  # Two's complement


CHECKSUM_FIELD = BitField('checksum', 0, 8)
VERSION_FIELD = BitField('format_version', 8, 8)

# Crosshair fields of format version 1, in payload order
FIELD_LAYOUT: Tuple[BitField, ...] = (
    BitField('gap', 16, 8, scale=10, signed=True),
    BitField('outline_thickness', 24, 8, scale=2),
    BitField('red', 32, 8),
    BitField('green', 40, 8),
    BitField('blue', 48, 8),
    BitField('alpha', 56, 8),
    BitField('split_distance', 64, 7),
    BitField('follow_recoil', 71, 1),
    BitField('fixed_crosshair_gap', 72, 8, scale=10, signed=True),
    BitField('color', 80, 3),
    BitField('outline_enabled', 83, 1),
    BitField('inner_split_alpha', 84, 4, scale=10),
    BitField('outer_split_alpha', 88, 4, scale=10),
    BitField('split_size_ratio', 92, 4, scale=10),
    BitField('thickness', 96, 8, scale=10),
    BitField('style', 105, 3),
    BitField('center_dot_enabled', 108, 1),
    BitField('deployed_weapon_gap_enabled', 109, 1),
    BitField('alpha_enabled', 110, 1),
    BitField('t_style_enabled', 111, 1),
    BitField('length', 112, 13, scale=10),
)

BOOLEAN_FIELD_NAMES = frozenset(field.name for field in FIELD_LAYOUT if field.width == 1)


def _field_mask(field: BitField) -> int:
    return ((1 << field.width) - 1) << field.offset


def _reserved_mask() -> int:
    mask = (1 << PAYLOAD_BITS) - 1
    for field in (CHECKSUM_FIELD, VERSION_FIELD) + FIELD_LAYOUT:
        mask &= ~_field_mask(field)
    return mask


# Bits that belong to no field must be zero
RESERVED_MASK = _reserved_mask()


# ============================================================================
# TEXT <-> PAYLOAD
# ============================================================================

def is_valid_sharecode(code) -> bool:
    """Check the textual shape of a share code without decoding it."""
    return isinstance(code, str) and CODE_PATTERN.fullmatch(code) is not None


def sharecode_to_bytes(code: str) -> bytes:
    """
    Convert a share code into its 18 byte payload.

    Args:
        code: Share code in format CSGO-xxxxx-xxxxx-xxxxx-xxxxx-xxxxx

    Returns:
        The payload bytes (checksum not verified)

    Raises:
        MalformedCode: If the text is not a share code
        ChecksumMismatch: If the symbols encode more than 18 bytes
    """
    if not is_valid_sharecode(code):
        raise MalformedCode(f"Invalid share code: {code!r}")

    symbols = code[len(CODE_PREFIX):].replace('-', '')

    value = 0
    for symbol in reversed(symbols):
        value = value * DICTIONARY_LENGTH + _SYMBOL_VALUES[symbol]

    if value >> PAYLOAD_BITS:
        raise ChecksumMismatch("Share code does not encode an 18 byte payload")

    return value.to_bytes(PAYLOAD_SIZE, 'big')


def bytes_to_sharecode(payload: bytes) -> str:
    """
    Convert an 18 byte payload into a share code.

    Args:
        payload: Payload bytes, checksum included

    Returns:
        Share code in format CSGO-xxxxx-xxxxx-xxxxx-xxxxx-xxxxx
    """
    if len(payload) != PAYLOAD_SIZE:
        raise ValueError(f"Payload must be {PAYLOAD_SIZE} bytes, got {len(payload)}")

    value = int.from_bytes(payload, 'big')

    symbols = []
    for _ in range(SYMBOL_COUNT):
        value, remainder = divmod(value, DICTIONARY_LENGTH)
        symbols.append(DICTIONARY[remainder])

    code = ''.join(symbols)
    groups = [code[i:i + 5] for i in range(0, SYMBOL_COUNT, 5)]
    return '-'.join([CODE_PREFIX] + groups)


def payload_checksum(payload: bytes) -> int:
    """Compute the checksum of a payload (all bytes after the checksum byte)."""
    return sum(payload[1:]) % 256


# ============================================================================
# BIT FIELDS
# ============================================================================

def read_field(bits: int, field: BitField) -> int:
    """Extract the raw (unscaled) integer of a field from the payload bits."""
    raw = (bits >> field.offset) & ((1 << field.width) - 1)
    if field.signed and raw & (1 << (field.width - 1)):
        raw -= 1 << field.width
    return raw


def write_field(bits: int, field: BitField, raw: int) -> int:
    """Store the raw integer of a field into the payload bits."""
    if field.signed:
        low, high = -(1 << (field.width - 1)), (1 << (field.width - 1)) - 1
    else:
        low, high = 0, (1 << field.width) - 1
    if not low <= raw <= high:
        raise FieldOutOfRange(field.name, raw)

    raw &= (1 << field.width) - 1
    return (bits & ~_field_mask(field)) | (raw << field.offset)


# ============================================================================
# DECODE / ENCODE
# ============================================================================

def decode(code: str) -> CrosshairSettings:
    """
    Decode a crosshair share code.

    Args:
        code: Share code (e.g. ``CSGO-O4Jsi-V36wY-rTMGK-9w7qF-jQ8WB``)

    Returns:
        The decoded CrosshairSettings

    Raises:
        MalformedCode: The text is not a share code
        ChecksumMismatch: The payload integrity check failed
        UnsupportedVersion: The payload format version is unknown
        FieldOutOfRange: A field value is outside its documented range
    """
    payload = sharecode_to_bytes(code)
    bits = int.from_bytes(payload, 'little')

    if read_field(bits, CHECKSUM_FIELD) != payload_checksum(payload):
        raise ChecksumMismatch(f"Checksum mismatch in share code {code}")

    version = read_field(bits, VERSION_FIELD)
    if version not in SUPPORTED_FORMAT_VERSIONS:
        raise UnsupportedVersion(version)

    if bits & RESERVED_MASK:
        raise FieldOutOfRange('reserved')

    values = {}
    for field in FIELD_LAYOUT:
        raw = read_field(bits, field)
        if field.name in BOOLEAN_FIELD_NAMES:
            values[field.name] = bool(raw)
        elif field.scale == 1:
            values[field.name] = raw
        else:
            values[field.name] = raw / field.scale

    return CrosshairSettings(format_version=version, **values)


def encode(settings: CrosshairSettings) -> str:
    """
    Encode crosshair settings into a share code.

    Args:
        settings: Settings to encode

    Returns:
        Share code in format CSGO-xxxxx-xxxxx-xxxxx-xxxxx-xxxxx
    """
    bits = write_field(0, VERSION_FIELD, settings.format_version)
    for field in FIELD_LAYOUT:
        value = getattr(settings, field.name)
        bits = write_field(bits, field, int(round(value * field.scale)))

    payload = bytearray(bits.to_bytes(PAYLOAD_SIZE, 'little'))
    payload[0] = payload_checksum(payload)
    return bytes_to_sharecode(bytes(payload))
