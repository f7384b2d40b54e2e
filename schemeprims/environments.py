"""Environment specifier procedures."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from .values import EnvSpec, ensure_arity, get_version


def return_env(args: Sequence[Any], env: EnvSpec) -> EnvSpec:
    """Check the report version argument and return the specifier ``env``."""
    ensure_arity(args, 1)
    get_version(args[0])
    return env


def primitives() -> dict[str, Callable[[Sequence[Any]], Any]]:
    """The environment procedures, by Scheme name."""
    return {
        "scheme-report-environment": lambda args: return_env(args, EnvSpec.SCHEME_REPORT),
        "null-environment": lambda args: return_env(args, EnvSpec.NULL),
    }