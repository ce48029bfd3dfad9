import pytest

from cs2_crosshair.utils.identifier import (
    IdentifierKind,
    InvalidIdentifier,
    classify_identifier,
    is_steam_id64,
)
from tests.conftest import VALID_CODE


@pytest.mark.parametrize("raw, kind, value", [
    (VALID_CODE, IdentifierKind.SHARE_CODE, VALID_CODE),
    ("/" + VALID_CODE + "/", IdentifierKind.SHARE_CODE, VALID_CODE),
    ("76561198123456789", IdentifierKind.STEAM_ID64, "76561198123456789"),
    ("profiles/76561198123456789", IdentifierKind.STEAM_ID64, "76561198123456789"),
    ("id/exampleuser", IdentifierKind.STEAM_VANITY, "exampleuser"),
    ("ropz", IdentifierKind.THIRD_PARTY, "ropz"),
    ("  ropz  ", IdentifierKind.THIRD_PARTY, "ropz"),
    ("12345", IdentifierKind.THIRD_PARTY, "12345"),
])
def test_classification(raw, kind, value):
    identifier = classify_identifier(raw)
    assert identifier.kind == kind
    assert identifier.value == value
    assert identifier.is_share_code == (kind == IdentifierKind.SHARE_CODE)


@pytest.mark.parametrize("raw", [
    "",
    "   ",
    "/",
    "a" * 46,
    "<script>",
    "name&more",
    'quote"d',
    "profiles/12345",
    "id/a/b",
    "some/path",
    None,
])
def test_invalid_identifiers(raw):
    with pytest.raises(InvalidIdentifier):
        classify_identifier(raw)


def test_max_length_is_configurable():
    assert classify_identifier("a" * 46, max_length=50).kind == IdentifierKind.THIRD_PARTY
    with pytest.raises(InvalidIdentifier):
        classify_identifier("abcdef", max_length=5)


def test_invalid_identifier_is_a_value_error():
    assert issubclass(InvalidIdentifier, ValueError)


@pytest.mark.parametrize("value, expected", [
    ("76561198123456789", True),
    ("7656119812345678", False),
    ("765611981234567890", False),
    ("86561198123456789", False),
])
def test_steam_id64(value, expected):
    assert is_steam_id64(value) == expected
