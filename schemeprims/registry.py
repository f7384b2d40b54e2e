"""The table of all primitive procedures, by Scheme name."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from . import (
    chars,
    environments,
    equivalence,
    lists,
    numeric,
    pred,
    strings,
    symbols,
    vectors,
)

_MODULES = (
    numeric,
    equivalence,
    lists,
    pred,
    vectors,
    strings,
    symbols,
    chars,
    environments,
)


@dataclass(frozen=True)
class Primitive:
    """A named built-in procedure; two primitives are equal when their names are."""

    name: str
    func: Callable[[Sequence[Any]], Any] = field(compare=False, repr=False)

    def __call__(self, args: Sequence[Any]) -> Any:
        return self.func(args)

    def __str__(self) -> str:
        return f"#<primitive:{self.name}>"


def primitives() -> dict[str, Primitive]:
    """Every primitive procedure, keyed by its Scheme name."""
    return {
        name: Primitive(name, func)
        for module in _MODULES
        for name, func in module.primitives().items()
    }