"""Type predicates such as pair? and number?."""

from __future__ import annotations

import enum
import io
from typing import Any, Callable, Sequence

from .values import (
    EMPTY_LIST,
    EOF,
    Char,
    MString,
    Pair,
    Symbol,
    Vector,
    ensure_arity,
    is_number,
)


class TypeTag(enum.Enum):
    """The kinds of value a predicate can test for."""

    BOOLEAN = "boolean"
    SYMBOL = "symbol"
    CHAR = "char"
    VECTOR = "vector"
    PROCEDURE = "procedure"
    PAIR = "pair"
    NUMBER = "number"
    STRING = "string"
    NULL = "null"
    PORT = "port"
    IPORT = "input-port"
    OPORT = "output-port"
    EOF = "eof"


_SIMPLE_TAGS = (
    (Char, TypeTag.CHAR),
    (MString, TypeTag.STRING),
    (Symbol, TypeTag.SYMBOL),
    (Pair, TypeTag.PAIR),
    (Vector, TypeTag.VECTOR),
)


def _port_tags(port: io.IOBase) -> set[TypeTag]:
    tags = {TypeTag.PORT}
    try:
        if port.readable():
            tags.add(TypeTag.IPORT)
        if port.writable():
            tags.add(TypeTag.OPORT)
    except ValueError:
        pass
    return tags


def _tags_of(obj: Any) -> set[TypeTag]:
    if isinstance(obj, bool):
        return {TypeTag.BOOLEAN}
    if is_number(obj):
        return {TypeTag.NUMBER}
    for cls, tag in _SIMPLE_TAGS:
        if isinstance(obj, cls):
            return {tag}
    if obj is EMPTY_LIST:
        return {TypeTag.NULL}
    if obj is EOF:
        return {TypeTag.EOF}
    if isinstance(obj, io.IOBase):
        return _port_tags(obj)
    if callable(obj):
        return {TypeTag.PROCEDURE}
    return set()


def pred(args: Sequence[Any], tag: TypeTag) -> bool:
    """Whether the single argument is of the kind named by ``tag``."""
    ensure_arity(args, 1)
    return tag in _tags_of(args[0])


def _predicate(tag: TypeTag) -> Callable[[Sequence[Any]], bool]:
    return lambda args: pred(args, tag)


def primitives() -> dict[str, Callable[[Sequence[Any]], Any]]:
    """The type predicates, by Scheme name."""
    names = {
        "boolean?": TypeTag.BOOLEAN,
        "symbol?": TypeTag.SYMBOL,
        "char?": TypeTag.CHAR,
        "vector?": TypeTag.VECTOR,
        "procedure?": TypeTag.PROCEDURE,
        "pair?": TypeTag.PAIR,
        "number?": TypeTag.NUMBER,
        "string?": TypeTag.STRING,
        "null?": TypeTag.NULL,
        "port?": TypeTag.PORT,
        "input-port?": TypeTag.IPORT,
        "output-port?": TypeTag.OPORT,
        "eof-object?": TypeTag.EOF,
    }
    return {name: _predicate(tag) for name, tag in names.items()}