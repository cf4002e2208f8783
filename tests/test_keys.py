import pytest

from editcommands.commontypes import KeyInputError
from editcommands.keys import DEFAULT_KEY_INPUT, KeyInput, KeyModifiers, VimKey, apply_modifiers, char_to_key_input

SHIFT = KeyModifiers.SHIFT
CONTROL = KeyModifiers.CONTROL
ALT = KeyModifiers.ALT


def test_apply_modifiers_adds():
    left = KeyInput(key=VimKey.LEFT)
    assert apply_modifiers(left, SHIFT) == KeyInput(key=VimKey.LEFT, modifiers=SHIFT)
    assert left.modifiers == KeyModifiers.NONE


def test_apply_modifiers_none_is_identity():
    ki = KeyInput(key=VimKey.RAW_CHARACTER, char="a", modifiers=ALT)
    assert apply_modifiers(ki, KeyModifiers.NONE) == ki


@pytest.mark.parametrize(
    "first,second",
    (
        (SHIFT, CONTROL),
        (CONTROL, ALT),
        (SHIFT | ALT, CONTROL),
        (SHIFT, SHIFT),
    ),
)
def test_apply_modifiers_order_does_not_matter(first, second):
    ki = KeyInput(key=VimKey.UP)
    assert apply_modifiers(apply_modifiers(ki, first), second) == apply_modifiers(apply_modifiers(ki, second), first)
    assert apply_modifiers(apply_modifiers(ki, first), second) == apply_modifiers(ki, first | second)


@pytest.mark.parametrize(
    "char,expected",
    (
        ("a", KeyInput(key=VimKey.RAW_CHARACTER, char="a")),
        ("\0", KeyInput(key=VimKey.RAW_CHARACTER, char="\0")),
        ("\t", KeyInput(key=VimKey.TAB)),
        ("\r", KeyInput(key=VimKey.ENTER)),
        ("\x1b", KeyInput(key=VimKey.ESCAPE)),
        ("\b", KeyInput(key=VimKey.BACK)),
    ),
)
def test_char_to_key_input(char, expected):
    assert char_to_key_input(char) == expected


@pytest.mark.parametrize("char", ("", "ab"))
def test_char_to_key_input_needs_one_char(char):
    with pytest.raises(KeyInputError):
        char_to_key_input(char)


def test_key_input_is_hashable_value():
    assert {KeyInput(key=VimKey.LEFT, modifiers=SHIFT), KeyInput(key=VimKey.LEFT, modifiers=SHIFT)} == {
        KeyInput(key=VimKey.LEFT, modifiers=SHIFT)
    }
    assert KeyInput(key=VimKey.LEFT) != KeyInput(key=VimKey.LEFT, modifiers=SHIFT)


def test_default_key_input():
    assert DEFAULT_KEY_INPUT.key is VimKey.NONE
    assert not DEFAULT_KEY_INPUT.has_char
    assert not DEFAULT_KEY_INPUT.modifiers


def test_modifier_names():
    assert (SHIFT | ALT).names == ["SHIFT", "ALT"]
    assert KeyModifiers.NONE.names == []
    assert KeyModifiers.from_flags(control=True, alt=True) == CONTROL | ALT


def test_str():
    assert str(KeyInput(key=VimKey.LEFT, modifiers=SHIFT | CONTROL)) == "SHIFT-CONTROL-LEFT"
    assert str(char_to_key_input("q")) == "'q'"
