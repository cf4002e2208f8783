# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import enum
import typing

import msgspec

from .commontypes import KeyInputError


# Logical keys, independent of how any host encodes them. RAW_CHARACTER is any key
# which is fully described by the character it produces.
class VimKey(enum.IntEnum):
    NONE = 0
    RAW_CHARACTER = 1
    ENTER = 2
    ESCAPE = 3
    TAB = 4
    BACK = 5
    DELETE = 6
    LEFT = 7
    UP = 8
    RIGHT = 9
    DOWN = 10
    HOME = 11
    END = 12
    PAGE_UP = 13
    PAGE_DOWN = 14
    INSERT = 15
    HELP = 16
    F1 = 21
    F2 = 22
    F3 = 23
    F4 = 24
    F5 = 25
    F6 = 26
    F7 = 27
    F8 = 28
    F9 = 29
    F10 = 30
    F11 = 31
    F12 = 32
    KEYPAD_0 = 40
    KEYPAD_1 = 41
    KEYPAD_2 = 42
    KEYPAD_3 = 43
    KEYPAD_4 = 44
    KEYPAD_5 = 45
    KEYPAD_6 = 46
    KEYPAD_7 = 47
    KEYPAD_8 = 48
    KEYPAD_9 = 49
    KEYPAD_DECIMAL = 50
    KEYPAD_ENTER = 51
    KEYPAD_DIVIDE = 52
    KEYPAD_MULTIPLY = 53
    KEYPAD_MINUS = 54
    KEYPAD_PLUS = 55


class KeyModifiers(enum.Flag):
    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()

    @property
    def names(self) -> list[str]:
        return [m.name for m in (KeyModifiers.SHIFT, KeyModifiers.CONTROL, KeyModifiers.ALT) if m in self]

    @classmethod
    def from_flags(cls, *, shift: bool = False, control: bool = False, alt: bool = False):
        modifiers = cls.NONE
        if shift:
            modifiers |= cls.SHIFT
        if control:
            modifiers |= cls.CONTROL
        if alt:
            modifiers |= cls.ALT
        return modifiers


class KeyInput(msgspec.Struct, frozen=True, kw_only=True):
    key: VimKey
    modifiers: KeyModifiers = KeyModifiers.NONE
    char: typing.Optional[str] = None

    @property
    def has_char(self):
        return self.char is not None

    def __str__(self):
        label = repr(self.char) if self.key is VimKey.RAW_CHARACTER else self.key.name
        if self.modifiers:
            return "-".join([*self.modifiers.names, label])
        return label


# Stands in for commands which were not produced by a keystroke at all, such as
# undo and redo triggered from a toolbar button.
DEFAULT_KEY_INPUT = KeyInput(key=VimKey.NONE)


def apply_modifiers(key_input: KeyInput, modifiers: KeyModifiers) -> KeyInput:
    """Return key_input with modifiers added to the ones it already carries.

    Modifiers are only ever added, so applying the same set twice, or applying
    two sets in either order, gives the same result.
    """
    combined = key_input.modifiers | modifiers
    if combined == key_input.modifiers:
        return key_input
    return msgspec.structs.replace(key_input, modifiers=combined)


def vim_key_to_key_input(key: VimKey) -> KeyInput:
    return KeyInput(key=key)


# Control characters which hosts deliver as typed characters but which the
# editing engine knows as named keys.
_CONTROL_CHARS = {
    "\t": VimKey.TAB,
    "\r": VimKey.ENTER,
    "\x1b": VimKey.ESCAPE,
    "\b": VimKey.BACK,
}


def char_to_key_input(char: str) -> KeyInput:
    if len(char) != 1:
        raise KeyInputError(f"Expected a single character, got {char!r}")
    if char in _CONTROL_CHARS:
        return vim_key_to_key_input(_CONTROL_CHARS[char])
    return KeyInput(key=VimKey.RAW_CHARACTER, char=char)


ENTER_KEY = vim_key_to_key_input(VimKey.ENTER)
ESCAPE_KEY = vim_key_to_key_input(VimKey.ESCAPE)
TAB_KEY = vim_key_to_key_input(VimKey.TAB)
