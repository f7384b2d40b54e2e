"""Conversions between symbols and strings."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from .values import MString, Symbol, ensure_arity, get_string, get_symbol


def symbol_to_string(args: Sequence[Any]) -> MString:
    """symbol->string: a fresh string holding the symbol's name."""
    ensure_arity(args, 1)
    return MString(get_symbol(args[0]).name)


def string_to_symbol(args: Sequence[Any]) -> Symbol:
    """string->symbol: the symbol named by the string."""
    ensure_arity(args, 1)
    return Symbol(get_string(args[0]).value)


def primitives() -> dict[str, Callable[[Sequence[Any]], Any]]:
    """The symbol procedures, by Scheme name."""
    return {
        "symbol->string": symbol_to_string,
        "string->symbol": string_to_symbol,
    }