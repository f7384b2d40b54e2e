"""Runtime values shared by the primitive procedures, and argument checks."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Iterable, Sequence

_USIZE_MAX = 2**64 - 1
_RADIXES = frozenset({2, 8, 10, 16})


class Ordering(enum.Enum):
    """Result of comparing two values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> Ordering:
        """Return the opposite ordering."""
        return Ordering(-self.value)


class _Marker:
    """A unique constant value such as the empty list."""

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        self._text = text

    def __repr__(self) -> str:
        return self._text


EMPTY_LIST = _Marker("()")
VOID = _Marker("#<void>")
EOF = _Marker("#<eof>")


@dataclass(frozen=True)
class Symbol:
    """A symbol; two symbols with the same name are the same symbol."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Char:
    """A single character."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 1:
            raise ValueError(f"a character holds exactly one code point: {self.value!r}")


@dataclass(eq=False)
class MString:
    """A mutable string; equality is identity."""

    value: str = ""

    def __len__(self) -> int:
        return len(self.value)


@dataclass(eq=False)
class Pair:
    """A mutable cons cell; equality is identity."""

    car: Any
    cdr: Any


@dataclass(eq=False)
class Vector:
    """A mutable vector; equality is identity."""

    items: list = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)


class EnvSpec(enum.Enum):
    """An environment specifier as returned by the environment procedures."""

    SCHEME_REPORT = "scheme-report"
    NULL = "null"


class EvalError(Exception):
    """Base class of errors raised by primitive procedures."""


class ArityMismatch(EvalError):
    """A procedure received the wrong number of arguments."""

    def __init__(self, expected: int, max_expected: int | None, got: int) -> None:
        self.expected = expected
        self.max_expected = max_expected
        self.got = got
        if max_expected is None:
            wanted = f"at least {expected}"
        elif max_expected == expected:
            wanted = str(expected)
        else:
            wanted = f"{expected} to {max_expected}"
        super().__init__(f"arity mismatch: expected {wanted}, got {got}")


class ContractViolation(EvalError):
    """An argument was not of the kind a procedure requires."""

    def __init__(self, expected: str, got: Any) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"contract violation: expected {expected}, got {got!r}")


class IndexOutOfBounds(EvalError):
    """An index lay outside a string or vector."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"index {index} out of bounds for length {length}")


class DivisionByZero(EvalError):
    """A division by exact or inexact zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


class InexactNonDecimalFormat(EvalError):
    """An inexact number was asked to be written in a radix other than 10."""

    def __init__(self) -> None:
        super().__init__("inexact numbers can only be formatted in radix 10")


_SAME = object()


def ensure_arity(args: Sequence[Any], low: int, high: Any = _SAME) -> None:
    """Raise ArityMismatch unless low <= len(args) <= high.

    Without ``high`` exactly ``low`` arguments are required; ``high=None``
    means there is no upper bound.
    """
    if high is _SAME:
        high = low
    count = len(args)
    if count < low or (high is not None and count > high):
        raise ArityMismatch(low, high, count)


def is_number(obj: Any) -> bool:
    """Whether ``obj`` is a Scheme number (int, Fraction or float, never bool)."""
    return isinstance(obj, (int, Fraction, float)) and not isinstance(obj, bool)


def is_exact(n: Any) -> bool:
    """Whether the number ``n`` is exact."""
    return not isinstance(n, float)


def make_list(items: Iterable[Any], tail: Any = EMPTY_LIST) -> Any:
    """Build a chain of pairs holding ``items`` and ending in ``tail``."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def _atom_eqv(a: Any, b: Any) -> bool:
    if is_number(a) or is_number(b):
        return is_number(a) and is_number(b) and is_exact(a) == is_exact(b) and a == b
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, (Char, Symbol, EnvSpec)):
        return a == b
    return a is b


def equal(a: Any, b: Any) -> bool:
    """Structural equality: pairs, vectors and strings by contents, the rest by eqv."""
    pending = [(a, b)]
    while pending:
        x, y = pending.pop()
        if isinstance(x, Pair):
            if not isinstance(y, Pair):
                return False
            if x is not y:
                pending.append((x.cdr, y.cdr))
                pending.append((x.car, y.car))
        elif isinstance(x, Vector):
            if not isinstance(y, Vector) or len(x.items) != len(y.items):
                return False
            if x is not y:
                pending.extend(zip(x.items, y.items))
        elif isinstance(x, MString):
            if not isinstance(y, MString) or x.value != y.value:
                return False
        elif not _atom_eqv(x, y):
            return False
    return True


def get_num(arg: Any) -> Any:
    """Return ``arg`` if it is a number."""
    if not is_number(arg):
        raise ContractViolation("number", arg)
    return arg


def _is_integer_value(n: Any) -> bool:
    if isinstance(n, int):
        return True
    if isinstance(n, Fraction):
        return n.denominator == 1
    return n.is_integer()


def get_int(arg: Any) -> Any:
    """Return ``arg`` if it is an integer-valued number, exact or inexact."""
    if not is_number(arg) or not _is_integer_value(arg):
        raise ContractViolation("integer", arg)
    return arg


def _exact_nonneg_int(arg: Any, limit: int) -> int | None:
    if not is_number(arg) or not is_exact(arg) or not _is_integer_value(arg):
        return None
    value = int(arg)
    if value < 0 or value > limit:
        return None
    return value


def get_len(arg: Any) -> int:
    """Return ``arg`` as a length or index: an exact non-negative integer."""
    value = _exact_nonneg_int(arg, _USIZE_MAX)
    if value is None:
        raise ContractViolation("valid length", arg)
    return value


def get_radix(arg: Any) -> int:
    """Return ``arg`` as a radix: one of 2, 8, 10 and 16."""
    value = _exact_nonneg_int(arg, 2**32 - 1)
    if value is None or value not in _RADIXES:
        raise ContractViolation("radix", arg)
    return value


def get_string(arg: Any) -> MString:
    """Return ``arg`` if it is a string."""
    if not isinstance(arg, MString):
        raise ContractViolation("string", arg)
    return arg


def get_char(arg: Any) -> str:
    """Return the character held by ``arg``."""
    if not isinstance(arg, Char):
        raise ContractViolation("char", arg)
    return arg.value


def get_symbol(arg: Any) -> Symbol:
    """Return ``arg`` if it is a symbol."""
    if not isinstance(arg, Symbol):
        raise ContractViolation("symbol", arg)
    return arg


def get_pair(arg: Any) -> Pair:
    """Return ``arg`` if it is a pair."""
    if not isinstance(arg, Pair):
        raise ContractViolation("pair", arg)
    return arg


def get_vector(arg: Any) -> Vector:
    """Return ``arg`` if it is a vector."""
    if not isinstance(arg, Vector):
        raise ContractViolation("vector", arg)
    return arg


def get_version(arg: Any) -> None:
    """Check that ``arg`` is the exact report version 5."""
    if not (is_number(arg) and is_exact(arg) and arg == 5):
        raise ContractViolation("5", arg)


def get_env(arg: Any) -> EnvSpec:
    """Return ``arg`` if it is an environment specifier."""
    if not isinstance(arg, EnvSpec):
        raise ContractViolation("environment", arg)
    return arg