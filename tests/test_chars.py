from fractions import Fraction

import pytest

from schemeprims.chars import char_cmp, char_map, int_to_char, primitives
from schemeprims.values import ArityMismatch, Char, ContractViolation, MString, Ordering


def call(name, *args):
    return primitives()[name](list(args))


def test_char_cmp_equal_case_sensitive():
    assert char_cmp([Char("x"), Char("x")], Ordering.EQUAL, True, False) is True
    assert char_cmp([Char("x"), Char("X")], Ordering.EQUAL, True, False) is False


def test_char_cmp_equal_case_insensitive():
    assert char_cmp([Char("x"), Char("X")], Ordering.EQUAL, True, True) is True


def test_char_cmp_less():
    assert char_cmp([Char("a"), Char("b")], Ordering.LESS, True, False) is True
    assert char_cmp([Char("a"), Char("a")], Ordering.LESS, True, False) is False
    assert char_cmp([Char("a"), Char("A")], Ordering.LESS, False, True) is True
    assert char_cmp([Char("a"), Char("a")], Ordering.LESS, False, False) is True


def test_char_cmp_arity():
    with pytest.raises(ArityMismatch) as info:
        char_cmp([Char("a")], Ordering.LESS, True, False)
    assert info.value.got == 1


def test_char_map():
    assert char_map([Char("a")], lambda c: Char(c.upper())) == Char("A")
    s = MString("a")
    with pytest.raises(ContractViolation) as info:
        char_map([s], lambda c: Char(c.upper()))
    assert info.value.expected == "char"
    assert info.value.got is s


def test_int_to_char():
    assert int_to_char([97]) == Char("a")
    assert int_to_char([0]) == Char("\0")
    assert int_to_char([Fraction(65, 1)]) == Char("A")


@pytest.mark.parametrize("bad", [1000000000, -1, 65.0, Fraction(1, 2), 0xD800])
def test_int_to_char_errors(bad):
    with pytest.raises(ContractViolation) as info:
        int_to_char([bad])
    assert info.value.expected == "character value"
    assert info.value.got == bad


@pytest.mark.parametrize(
    "name, a, b, expected",
    [
        ("char=?", "a", "a", True),
        ("char<?", "a", "b", True),
        ("char<?", "A", "B", True),
        ("char<?", "6", "9", True),
        ("char<?", "a", "a", False),
        ("char<=?", "a", "a", True),
        ("char<=?", "a", "A", False),
        ("char-ci<=?", "a", "A", True),
        ("char>?", "b", "a", True),
        ("char>=?", "a", "b", False),
        ("char-ci>?", "B", "a", True),
    ],
)
def test_comparison_primitives(name, a, b, expected):
    assert call(name, Char(a), Char(b)) is expected


@pytest.mark.parametrize(
    "name, c, expected",
    [
        ("char-alphabetic?", "a", True),
        ("char-numeric?", "1", True),
        ("char-numeric?", "a", False),
        ("char-whitespace?", "a", False),
        ("char-whitespace?", " ", True),
        ("char-upper-case?", "a", False),
        ("char-upper-case?", "A", True),
        ("char-lower-case?", "a", True),
        ("char-lower-case?", "A", False),
    ],
)
def test_classification(name, c, expected):
    assert call(name, Char(c)) is expected


def test_case_conversion():
    assert call("char-upcase", Char("a")) == Char("A")
    assert call("char-downcase", Char("A")) == Char("a")
    assert call("char-upcase", Char("A")) == Char("A")
    assert call("char-downcase", Char("1")) == Char("1")


def test_integer_conversions():
    assert call("char->integer", Char("a")) == 97
    assert call("integer->char", 65) == Char("A")