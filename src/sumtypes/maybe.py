"""
Optional values.

To paraphrase Haskell's ``Data.Maybe``: a Maybe either contains a value
(``Maybe.just(1)``) or is empty (``Maybe.nothing()``).

Usage:
    >>> Maybe.of(None).or_else(0)
    0
    >>> Maybe.of(2).map(lambda x: x * 10)
    Just(value=20)
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from sumtypes.core import sum_type


T = TypeVar("T")
U = TypeVar("U")

__all__: list[str] = ["Maybe"]


@sum_type("nothing", just="value")
class Maybe:
    """Optional value: ``nothing`` or ``just(value)``."""

    @classmethod
    def of(cls, value: T | None) -> Maybe:
        """``nothing`` for ``None``, ``just(value)`` otherwise."""
        if value is None:
            return cls.nothing()
        return cls.just(value)

    def map(self, f: Callable[[Any], U]) -> Maybe:
        """Apply ``f`` to the value, if present, wrapping the result in ``just``."""
        return self.match(
            lambda m: m.just(lambda value: Maybe.just(f(value))).nothing(Maybe.nothing())
        )

    def flat_map(self, f: Callable[[Any], Maybe]) -> Maybe:
        return self.match(just=f, nothing=Maybe.nothing())

    def or_else(self, default: T | None = None) -> Any:
        """The value if present, else ``default``."""
        return self.match(just=lambda value: value, nothing=lambda: default)

    def or_else_get(self, compute: Callable[[], U]) -> Any:
        """The value if present, else the result of calling ``compute``."""
        return self.match(just=lambda value: value, nothing=compute)
