"""Vector construction, access and mutation."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from .values import (
    VOID,
    IndexOutOfBounds,
    Vector,
    ensure_arity,
    get_len,
    get_vector,
)


def vector(args: Sequence[Any]) -> Vector:
    """vector: a fresh vector holding the arguments."""
    return Vector(list(args))


def make_vector(args: Sequence[Any]) -> Vector:
    """make-vector: a vector of the given length, filled with void or a value."""
    ensure_arity(args, 1, 2)
    length = get_len(args[0])
    fill = args[1] if len(args) == 2 else VOID
    return Vector([fill] * length)


def vector_length(args: Sequence[Any]) -> int:
    """vector-length: the number of elements in the vector."""
    ensure_arity(args, 1)
    return len(get_vector(args[0]).items)


def _checked_index(target: Vector, arg: Any) -> int:
    index = get_len(arg)
    if index >= len(target.items):
        raise IndexOutOfBounds(index, len(target.items))
    return index


def vector_ref(args: Sequence[Any]) -> Any:
    """vector-ref: the element at an index."""
    ensure_arity(args, 2)
    target = get_vector(args[0])
    return target.items[_checked_index(target, args[1])]


def vector_set(args: Sequence[Any]) -> Any:
    """vector-set!: replace the element at an index."""
    ensure_arity(args, 3)
    target = get_vector(args[0])
    target.items[_checked_index(target, args[1])] = args[2]
    return VOID


def vector_fill(args: Sequence[Any]) -> Any:
    """vector-fill!: replace every element with the given value."""
    ensure_arity(args, 2)
    target = get_vector(args[0])
    target.items[:] = [args[1]] * len(target.items)
    return VOID


def primitives() -> dict[str, Callable[[Sequence[Any]], Any]]:
    """The vector procedures, by Scheme name."""
    return {
        "vector": vector,
        "make-vector": make_vector,
        "vector-length": vector_length,
        "vector-ref": vector_ref,
        "vector-set!": vector_set,
        "vector-fill!": vector_fill,
    }