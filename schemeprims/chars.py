"""Character comparison, classification and conversion."""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Callable, Sequence

from .values import (
    Char,
    ContractViolation,
    Ordering,
    ensure_arity,
    get_char,
    is_number,
)

_ASCII_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_ASCII_DIGITS = frozenset("0123456789")
_ASCII_WHITESPACE = frozenset(" \t\n\x0c\r")
_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


def _compare(a: str, b: str) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def char_cmp(args: Sequence[Any], ord: Ordering, strict: bool, ci: bool) -> bool:
    """Compare two characters.

    With ``strict`` the comparison must equal ``ord``; otherwise it must not be
    the reverse of ``ord``. With ``ci`` the characters are compared lower-cased.
    """
    ensure_arity(args, 2)
    c1 = get_char(args[0])
    c2 = get_char(args[1])
    found = _compare(c1.lower(), c2.lower()) if ci else _compare(c1, c2)
    if strict:
        return found == ord
    return found != ord.reverse()


def char_map(args: Sequence[Any], func: Callable[[str], Any]) -> Any:
    """Apply ``func`` to the single character argument."""
    ensure_arity(args, 1)
    return func(get_char(args[0]))


def _charval_error(arg: Any) -> ContractViolation:
    return ContractViolation("character value", arg)


def int_to_char(args: Sequence[Any]) -> Char:
    """integer->char: the character with the given exact code point."""
    ensure_arity(args, 1)
    arg = args[0]
    if not is_number(arg):
        raise _charval_error(arg)
    if isinstance(arg, Fraction):
        if arg.denominator != 1:
            raise _charval_error(arg)
        code = arg.numerator
    elif isinstance(arg, int):
        code = arg
    else:
        raise _charval_error(arg)
    if code < 0 or code > _MAX_CODE_POINT or code in _SURROGATES:
        raise _charval_error(arg)
    return Char(chr(code))


def _ascii_upcase(c: str) -> str:
    return c.upper() if c in _ASCII_LOWER else c


def _ascii_downcase(c: str) -> str:
    return c.lower() if c in _ASCII_UPPER else c


def _mapped(func: Callable[[str], Any]) -> Callable[[Sequence[Any]], Any]:
    return lambda args: char_map(args, func)


def _compared(ord: Ordering, strict: bool, ci: bool) -> Callable[[Sequence[Any]], bool]:
    return lambda args: char_cmp(args, ord, strict, ci)


def primitives() -> dict[str, Callable[[Sequence[Any]], Any]]:
    """The character procedures, by Scheme name."""
    return {
        "char=?": _compared(Ordering.EQUAL, True, False),
        "char<?": _compared(Ordering.LESS, True, False),
        "char>?": _compared(Ordering.GREATER, True, False),
        "char<=?": _compared(Ordering.LESS, False, False),
        "char>=?": _compared(Ordering.GREATER, False, False),
        "char-ci=?": _compared(Ordering.EQUAL, True, True),
        "char-ci<?": _compared(Ordering.LESS, True, True),
        "char-ci>?": _compared(Ordering.GREATER, True, True),
        "char-ci<=?": _compared(Ordering.LESS, False, True),
        "char-ci>=?": _compared(Ordering.GREATER, False, True),
        "char-alphabetic?": _mapped(lambda c: c in _ASCII_UPPER or c in _ASCII_LOWER),
        "char-numeric?": _mapped(lambda c: c in _ASCII_DIGITS),
        "char-whitespace?": _mapped(lambda c: c in _ASCII_WHITESPACE),
        "char-upper-case?": _mapped(lambda c: c in _ASCII_UPPER),
        "char-lower-case?": _mapped(lambda c: c in _ASCII_LOWER),
        "char-upcase": _mapped(lambda c: Char(_ascii_upcase(c))),
        "char-downcase": _mapped(lambda c: Char(_ascii_downcase(c))),
        "char->integer": _mapped(ord_of),
        "integer->char": int_to_char,
    }


def ord_of(c: str) -> int:
    """The code point of the character ``c``."""
    return ord(c)