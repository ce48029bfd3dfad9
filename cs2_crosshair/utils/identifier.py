#!/usr/bin/env python3
"""
Identifier Classification

Sorts the identifiers users put in a request path into the kinds the service
resolves differently: crosshair share codes, SteamID64s, Steam vanity names
and third-party profile handles. No lookups happen here.
"""

import re
from dataclasses import dataclass
from enum import Enum

from cs2_crosshair.core.sharecode import is_valid_sharecode

STEAM_ID64_PATTERN = re.compile(r'7656119\d{10}')
FORBIDDEN_CHARACTERS = frozenset('<>"\'&')
DEFAULT_MAX_LENGTH = 45

PROFILES_PREFIX = 'profiles/'
VANITY_PREFIX = 'id/'


class InvalidIdentifier(ValueError):
    """Raised when an identifier cannot be used for any lookup"""
    pass


class IdentifierKind(Enum):
    """Kinds of identifier the service accepts."""
    SHARE_CODE = "share_code"
    STEAM_ID64 = "steam_id64"
    STEAM_VANITY = "steam_vanity"
    THIRD_PARTY = "third_party"


@dataclass(frozen=True)
class Identifier:
    """A classified identifier."""
    kind: IdentifierKind
    value: str  # Share code, SteamID64, vanity name or handle without prefixes

    @property
    def is_share_code(self) -> bool:
        return self.kind == IdentifierKind.SHARE_CODE


def is_steam_id64(value: str) -> bool:
    """Check whether value is a 17 digit individual-account SteamID64."""
    return STEAM_ID64_PATTERN.fullmatch(value) is not None


def _check_name(name: str, raw: str) -> str:
    if not name or '/' in name:
        raise InvalidIdentifier(f"Invalid identifier: {raw!r}")
    return name


def classify_identifier(raw: str, max_length: int = DEFAULT_MAX_LENGTH) -> Identifier:
    """
    Classify a user-supplied identifier.

    Accepted forms:
        CSGO-xxxxx-xxxxx-xxxxx-xxxxx-xxxxx   share code
        76561198123456789                    SteamID64
        profiles/76561198123456789           SteamID64
        id/exampleuser                       Steam vanity name
        ropz                                 third-party profile handle

    Args:
        raw: Identifier as received (surrounding slashes and whitespace ignored)
        max_length: Maximum accepted length after stripping

    Returns:
        The classified Identifier

    Raises:
        InvalidIdentifier: If the identifier is empty, too long, contains
            forbidden characters or is a malformed profiles/ or id/ path
    """
    if not isinstance(raw, str):
        raise InvalidIdentifier(f"Identifier must be a string, got {type(raw).__name__}")

    text = raw.strip().strip('/')
    if not text or len(text) > max_length:
        raise InvalidIdentifier(f"Invalid identifier length: {raw!r}")
    if FORBIDDEN_CHARACTERS.intersection(text):
        raise InvalidIdentifier(f"Identifier contains forbidden characters: {raw!r}")

    if is_valid_sharecode(text):
        return Identifier(IdentifierKind.SHARE_CODE, text)

    if text.startswith(PROFILES_PREFIX):
        steam_id = text[len(PROFILES_PREFIX):]
        if not is_steam_id64(steam_id):
            raise InvalidIdentifier(f"Invalid SteamID64: {steam_id!r}")
        return Identifier(IdentifierKind.STEAM_ID64, steam_id)

    if text.startswith(VANITY_PREFIX):
        name = _check_name(text[len(VANITY_PREFIX):], raw)
        return Identifier(IdentifierKind.STEAM_VANITY, name)

    if is_steam_id64(text):
        return Identifier(IdentifierKind.STEAM_ID64, text)

    return Identifier(IdentifierKind.THIRD_PARTY, _check_name(text, raw))
