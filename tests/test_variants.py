import pytest

from editcommands.commontypes import VariantError
from editcommands.variants import Variant, VariantPresence, char_variant, variant_char, variant_presence


@pytest.mark.parametrize(
    "variant,expected",
    (
        (None, VariantPresence.ABSENT),
        (Variant(), VariantPresence.PRESENT_IGNORABLE),
        (Variant(value=0), VariantPresence.PRESENT_SPECIFIC),
        (Variant(value=12), VariantPresence.PRESENT_SPECIFIC),
        (Variant(value="x"), VariantPresence.PRESENT_SPECIFIC),
    ),
)
def test_variant_presence(variant, expected):
    assert variant_presence(variant) is expected


@pytest.mark.parametrize(
    "variant,expected",
    (
        (None, "\0"),
        (Variant(), "\0"),
        (Variant(value=0x61), "a"),
        (Variant(value=0xFFFF), "\uffff"),
        (Variant(value="é"), "é"),
        (Variant(value=0x10000), None),
        (Variant(value=-5), None),
        (Variant(value=False), None),
        (Variant(value=""), None),
        (Variant(value="\U0001f600"), None),
    ),
)
def test_variant_char(variant, expected):
    assert variant_char(variant) == expected


def test_char_variant():
    assert char_variant("a") == Variant(value=0x61)
    assert variant_char(char_variant("ß")) == "ß"


@pytest.mark.parametrize("char", ("", "ab", "\U0001f600"))
def test_char_variant_rejects(char):
    with pytest.raises(VariantError):
        char_variant(char)
