import io
from fractions import Fraction

import pytest

from schemeprims.pred import TypeTag, pred, primitives
from schemeprims.values import (
    EMPTY_LIST,
    EOF,
    ArityMismatch,
    Char,
    MString,
    Pair,
    Symbol,
    Vector,
    make_list,
)


@pytest.mark.parametrize(
    "value, expected",
    [(1, True), (Fraction(1, 2), True), (0.5, True), (True, False)],
)
def test_number(value, expected):
    assert pred([value], TypeTag.Number if False else TypeTag.NUMBER) is expected


def test_null():
    assert pred([EMPTY_LIST], TypeTag.NULL) is True
    assert pred([Pair(1, 2)], TypeTag.NULL) is False


def test_pair():
    assert pred([EMPTY_LIST], TypeTag.PAIR) is False
    assert pred([Pair(1, 2)], TypeTag.PAIR) is True


def test_named_predicates():
    table = primitives()
    assert table["boolean?"]([True]) is True
    assert table["boolean?"]([False]) is True
    assert table["boolean?"]([1]) is False
    assert table["boolean?"]([EMPTY_LIST]) is False
    assert table["symbol?"]([Symbol("a")]) is True
    assert table["symbol?"]([EMPTY_LIST]) is False
    assert table["char?"]([Char("a")]) is True
    assert table["char?"]([Char("\n")]) is True
    assert table["char?"]([MString("a")]) is False
    assert table["string?"]([MString("a")]) is True
    assert table["string?"]([Symbol("a")]) is False
    assert table["vector?"]([Vector([1, 2, 3])]) is True
    assert table["vector?"]([make_list([1, 2, 3])]) is False
    assert table["pair?"]([1]) is False
    assert table["pair?"]([make_list([1, 2, 3])]) is True
    assert table["eof-object?"]([EOF]) is True
    assert table["eof-object?"]([EMPTY_LIST]) is False


def test_procedures():
    table = primitives()
    assert table["procedure?"]([lambda: 0]) is True
    assert table["procedure?"]([table["pair?"]]) is True
    assert table["number?"]([lambda: 10]) is False
    assert table["procedure?"]([Pair(1, 2)]) is False


def test_ports():
    table = primitives()
    stream = io.StringIO()
    assert table["port?"]([stream]) is True
    assert table["input-port?"]([stream]) is True
    assert table["output-port?"]([stream]) is True
    assert table["port?"]([MString("x")]) is False


def test_arity():
    with pytest.raises(ArityMismatch) as info:
        pred([1, 2], TypeTag.NUMBER)
    assert info.value.got == 2