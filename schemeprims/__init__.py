"""Primitive procedures for a Scheme interpreter, over plain Python values."""

__version__ = "0.1.0"
__all__ = [
    "values",
    "pred",
    "equivalence",
    "symbols",
    "lists",
    "numeric",
    "chars",
    "strings",
    "vectors",
    "environments",
    "registry",
]