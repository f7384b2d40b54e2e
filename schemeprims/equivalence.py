"""The equivalence predicates eqv? and eq?."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from .values import MString, Pair, Vector, ensure_arity, equal, is_number


def _eqv(a: Any, b: Any) -> bool:
    if isinstance(a, (Pair, Vector, MString)):
        return a is b
    return equal(a, b)


def eqv(args: Sequence[Any]) -> bool:
    """eqv?: numbers, characters and symbols by value, everything else by identity."""
    ensure_arity(args, 2)
    return _eqv(args[0], args[1])


def eq(args: Sequence[Any]) -> bool:
    """eq?: like eqv?, but numbers only when they are the same object."""
    ensure_arity(args, 2)
    a, b = args
    if is_number(a) and is_number(b):
        return a is b
    return _eqv(a, b)


def primitives() -> dict[str, Callable[[Sequence[Any]], Any]]:
    """The equivalence predicates, by Scheme name."""
    return {"eqv?": eqv, "eq?": eq}