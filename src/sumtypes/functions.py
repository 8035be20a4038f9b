"""Handler helpers for match expressions."""

from __future__ import annotations

from typing import Callable, TypeVar


T = TypeVar("T")

__all__: list[str] = ["const"]


def const(value: T) -> Callable[..., T]:
    """Build a handler that ignores its arguments and returns ``value``.

    Branch values that are callable are invoked as handlers, so a function
    meant to be the *result* of a branch has to be wrapped:

        >>> shout = str.upper
        >>> Maybe.just(1).match(just=const(shout), nothing=const(str.lower))  # doctest: +SKIP
    """

    def _const(*_args: object, **_kwargs: object) -> T:
        return value

    return _const
