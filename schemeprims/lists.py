"""Pair construction, selection and mutation."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from .values import VOID, Pair, ensure_arity, get_pair


def cons(args: Sequence[Any]) -> Pair:
    """cons: a fresh pair of the two arguments."""
    ensure_arity(args, 2)
    return Pair(args[0], args[1])


def select(args: Sequence[Any], first: bool) -> Any:
    """car when ``first`` is true, cdr otherwise."""
    ensure_arity(args, 1)
    pair = get_pair(args[0])
    return pair.car if first else pair.cdr


def set_select(args: Sequence[Any], first: bool) -> Any:
    """set-car! when ``first`` is true, set-cdr! otherwise."""
    ensure_arity(args, 2)
    pair = get_pair(args[0])
    if first:
        pair.car = args[1]
    else:
        pair.cdr = args[1]
    return VOID


def primitives() -> dict[str, Callable[[Sequence[Any]], Any]]:
    """The pair procedures, by Scheme name."""
    return {
        "cons": cons,
        "car": lambda args: select(args, True),
        "cdr": lambda args: select(args, False),
        "set-car!": lambda args: set_select(args, True),
        "set-cdr!": lambda args: set_select(args, False),
    }