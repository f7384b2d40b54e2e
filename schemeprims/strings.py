"""String construction, access, mutation and comparison."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from .values import (
    VOID,
    Char,
    IndexOutOfBounds,
    MString,
    Ordering,
    ensure_arity,
    get_char,
    get_len,
    get_string,
)


def make_string(args: Sequence[Any]) -> MString:
    """make-string: a string of the given length, filled with NUL or a character."""
    ensure_arity(args, 1, 2)
    length = get_len(args[0])
    fill = get_char(args[1]) if len(args) == 2 else "\0"
    return MString(fill * length)


def string(args: Sequence[Any]) -> MString:
    """string: a fresh string of the character arguments."""
    return MString("".join(get_char(arg) for arg in args))


def string_length(args: Sequence[Any]) -> int:
    """string-length: the number of characters in the string."""
    ensure_arity(args, 1)
    return len(get_string(args[0]).value)


def string_ref(args: Sequence[Any]) -> Char:
    """string-ref: the character at an index."""
    ensure_arity(args, 2)
    text = get_string(args[0]).value
    index = get_len(args[1])
    if index >= len(text):
        raise IndexOutOfBounds(index, len(text))
    return Char(text[index])


def string_set(args: Sequence[Any]) -> Any:
    """string-set!: replace the character at an index."""
    ensure_arity(args, 3)
    target = get_string(args[0])
    index = get_len(args[1])
    c = get_char(args[2])
    if index >= len(target.value):
        raise IndexOutOfBounds(index, len(target.value))
    target.value = target.value[:index] + c + target.value[index + 1 :]
    return VOID


def string_fill(args: Sequence[Any]) -> Any:
    """string-fill!: replace every character with the given one."""
    ensure_arity(args, 2)
    target = get_string(args[0])
    c = get_char(args[1])
    target.value = c * len(target.value)
    return VOID


def _compare(a: str, b: str) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def string_cmp(args: Sequence[Any], ord: Ordering, strict: bool, ci: bool) -> bool:
    """Compare two strings lexicographically.

    With ``strict`` the comparison must equal ``ord``; otherwise it must not be
    the reverse of ``ord``. With ``ci`` both strings are lower-cased first.
    """
    ensure_arity(args, 2)
    s1 = get_string(args[0]).value
    s2 = get_string(args[1]).value
    found = _compare(s1.lower(), s2.lower()) if ci else _compare(s1, s2)
    if strict:
        return found == ord
    return found != ord.reverse()


def string_copy(args: Sequence[Any]) -> MString:
    """string-copy: a fresh string with the same contents."""
    ensure_arity(args, 1)
    return MString(get_string(args[0]).value)


def substring(args: Sequence[Any]) -> MString:
    """substring: the characters from start up to but not including end."""
    ensure_arity(args, 3)
    text = get_string(args[0]).value
    start = get_len(args[1])
    end = get_len(args[2])
    if start > end:
        raise IndexOutOfBounds(start - 1, end)
    if end > len(text):
        raise IndexOutOfBounds(end - 1, len(text))
    return MString(text[start:end])


def string_append(args: Sequence[Any]) -> MString:
    """string-append: a fresh string joining all the string arguments."""
    return MString("".join(get_string(arg).value for arg in args))


def _compared(ord: Ordering, strict: bool, ci: bool) -> Callable[[Sequence[Any]], bool]:
    return lambda args: string_cmp(args, ord, strict, ci)


def primitives() -> dict[str, Callable[[Sequence[Any]], Any]]:
    """The string procedures, by Scheme name."""
    return {
        "make-string": make_string,
        "string": string,
        "string-length": string_length,
        "string-ref": string_ref,
        "string-set!": string_set,
        "string-fill!": string_fill,
        "string=?": _compared(Ordering.EQUAL, True, False),
        "string<?": _compared(Ordering.LESS, True, False),
        "string>?": _compared(Ordering.GREATER, True, False),
        "string<=?": _compared(Ordering.LESS, False, False),
        "string>=?": _compared(Ordering.GREATER, False, False),
        "string-ci=?": _compared(Ordering.EQUAL, True, True),
        "string-ci<?": _compared(Ordering.LESS, True, True),
        "string-ci>?": _compared(Ordering.GREATER, True, True),
        "string-ci<=?": _compared(Ordering.LESS, False, True),
        "string-ci>=?": _compared(Ordering.GREATER, False, True),
        "string-copy": string_copy,
        "substring": substring,
        "string-append": string_append,
    }