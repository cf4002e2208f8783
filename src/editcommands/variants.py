from __future__ import annotations

import enum
import typing

import msgspec

from .commontypes import VariantError

MAX_CHAR_CODE = 0xFFFF


class Variant(msgspec.Struct, frozen=True):
    """A variant payload attached to a native command.

    A command with no payload at all is passed a variant of None, not a Variant.
    A Variant whose value is None was passed by the host but holds nothing.
    """

    value: typing.Union[int, str, None] = None


class VariantPresence(enum.Enum):
    # no payload was passed
    ABSENT = enum.auto()
    # a payload was passed but it holds nothing, so it can't point anywhere
    PRESENT_IGNORABLE = enum.auto()
    # a payload was passed and it holds a value, such as a picked history point
    PRESENT_SPECIFIC = enum.auto()


def variant_presence(variant: typing.Optional[Variant]) -> VariantPresence:
    if variant is None:
        return VariantPresence.ABSENT
    if variant.value is None:
        return VariantPresence.PRESENT_IGNORABLE
    return VariantPresence.PRESENT_SPECIFIC


def variant_char(variant: typing.Optional[Variant]) -> typing.Optional[str]:
    """Read a payload as a single 16-bit character.

    An empty payload reads as the null character. Returns None if the payload holds
    something which is not a 16-bit character.
    """
    if variant is None or variant.value is None:
        return "\0"
    value = variant.value
    match value:
        case bool():
            return None
        case int() if 0 <= value <= MAX_CHAR_CODE:
            return chr(value)
        case str() if len(value) == 1 and ord(value) <= MAX_CHAR_CODE:
            return value
    return None


def char_variant(char: str) -> Variant:
    if len(char) != 1:
        raise VariantError(f"Expected a single character, got {char!r}")
    code = ord(char)
    if code > MAX_CHAR_CODE:
        raise VariantError(f"{char!r} does not fit in a 16-bit character")
    return Variant(value=code)
