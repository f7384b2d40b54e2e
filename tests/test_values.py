from fractions import Fraction

import pytest

from schemeprims.values import (
    EMPTY_LIST,
    ArityMismatch,
    Char,
    ContractViolation,
    EnvSpec,
    MString,
    Ordering,
    Pair,
    Symbol,
    Vector,
    ensure_arity,
    equal,
    get_char,
    get_env,
    get_int,
    get_len,
    get_num,
    get_pair,
    get_radix,
    get_string,
    get_symbol,
    get_vector,
    get_version,
    is_exact,
    is_number,
    make_list,
)


@pytest.mark.parametrize("value, expected", [(1, 1), (56, 56), (Fraction(5, 1), 5)])
def test_get_len_accepts(value, expected):
    assert get_len(value) == expected


@pytest.mark.parametrize("value", [-1, 3.0, Fraction(8, 5)])
def test_get_len_rejects(value):
    with pytest.raises(ContractViolation) as info:
        get_len(value)
    assert info.value.expected == "valid length"
    assert info.value.got == value


def test_ordering_reverse():
    assert Ordering.LESS.reverse() is Ordering.GREATER
    assert Ordering.GREATER.reverse() is Ordering.LESS
    assert Ordering.EQUAL.reverse() is Ordering.EQUAL


def test_ensure_arity_exact():
    ensure_arity([1, 2], 2)
    with pytest.raises(ArityMismatch) as info:
        ensure_arity([1], 2)
    assert (info.value.expected, info.value.max_expected, info.value.got) == (2, 2, 1)


def test_ensure_arity_unbounded():
    ensure_arity([1, 2, 3, 4], 1, None)
    with pytest.raises(ArityMismatch) as info:
        ensure_arity([], 1, None)
    assert info.value.max_expected is None
    assert info.value.got == 0


def test_ensure_arity_range():
    with pytest.raises(ArityMismatch) as info:
        ensure_arity([1, 2, 3], 1, 2)
    assert info.value.got == 3


def test_number_classification():
    assert is_number(3) and is_number(Fraction(1, 2)) and is_number(0.5)
    assert not is_number(True)
    assert not is_number(Char("a"))
    assert is_exact(Fraction(1, 2))
    assert not is_exact(1.0)


def test_get_num_and_int():
    assert get_num(Fraction(1, 2)) == Fraction(1, 2)
    assert get_int(3.0) == 3.0
    assert get_int(Fraction(4, 2)) == 2
    with pytest.raises(ContractViolation) as info:
        get_int(0.5)
    assert info.value.expected == "integer"
    with pytest.raises(ContractViolation) as info:
        get_num(EMPTY_LIST)
    assert info.value.expected == "number"


@pytest.mark.parametrize("radix", [2, 8, 10, 16])
def test_get_radix_accepts(radix):
    assert get_radix(radix) == radix


@pytest.mark.parametrize("radix", [3, -2, 16.0])
def test_get_radix_rejects(radix):
    with pytest.raises(ContractViolation) as info:
        get_radix(radix)
    assert info.value.expected == "radix"


def test_get_version():
    get_version(5)
    get_version(Fraction(5, 1))
    for bad in (6, 5.0):
        with pytest.raises(ContractViolation) as info:
            get_version(bad)
        assert info.value.expected == "5"


def test_get_env():
    assert get_env(EnvSpec.NULL) is EnvSpec.NULL
    with pytest.raises(ContractViolation) as info:
        get_env(5)
    assert info.value.expected == "environment"


def test_typed_getters():
    s = MString("abc")
    p = Pair(1, 2)
    v = Vector([1])
    assert get_string(s) is s
    assert get_pair(p) is p
    assert get_vector(v) is v
    assert get_char(Char("x")) == "x"
    assert get_symbol(Symbol("foo")) == Symbol("foo")
    for getter, name in [
        (get_string, "string"),
        (get_pair, "pair"),
        (get_vector, "vector"),
        (get_char, "char"),
        (get_symbol, "symbol"),
    ]:
        with pytest.raises(ContractViolation) as info:
            getter(EMPTY_LIST)
        assert info.value.expected == name


def test_make_list():
    lst = make_list([1, 2, 3])
    assert lst.car == 1 and lst.cdr.car == 2 and lst.cdr.cdr.car == 3
    assert lst.cdr.cdr.cdr is EMPTY_LIST
    assert make_list([]) is EMPTY_LIST
    dotted = make_list([1], Symbol("b"))
    assert dotted.cdr == Symbol("b")


def test_equal_structures():
    a = make_list([Symbol("a"), make_list([Symbol("b")]), Symbol("c")])
    b = make_list([Symbol("a"), make_list([Symbol("b")]), Symbol("c")])
    assert equal(a, b)
    assert equal(MString("abc"), MString("abc"))
    assert equal(Vector([Symbol("a")] * 5), Vector([Symbol("a")] * 5))
    assert equal(
        Vector([make_list([1, 2]), Vector([3, 4])]),
        Vector([make_list([1, 2]), Vector([3, 4])]),
    )
    assert equal(2, 2)


def test_equal_distinguishes():
    assert not equal(make_list([1, 2]), make_list([1, 3]))
    assert not equal(Vector([1]), Vector([1, 2]))
    assert not equal(MString("abc"), MString("abd"))
    assert not equal(2, 2.0)
    assert not equal(False, Symbol("nil"))
    assert not equal(1, True)


def test_char_requires_single_character():
    with pytest.raises(ValueError):
        Char("ab")