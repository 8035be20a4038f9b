"""
Result type for explicit error handling.

To paraphrase Rust's ``std::result``: ``Result.success(value)`` represents a
success and contains a value; ``Result.failure(error)`` represents an error.

Records support Python's structural pattern matching as well as exhaustive
:meth:`~sumtypes.variant.Variant.match`:

    >>> def divide(a: float, b: float) -> Result:
    ...     if b == 0:
    ...         return Result.failure("Division by zero")
    ...     return Result.success(a / b)
    ...
    >>> match divide(10, 2):
    ...     case Result.Success(value):
    ...         print(f"Result: {value}")
    ...     case Result.Failure(error):
    ...         print(f"Error: {error}")
    Result: 5.0
"""

from __future__ import annotations

from typing import Any, Callable, NoReturn, ParamSpec, Sequence, TypeVar

from sumtypes.core import sum_type
from sumtypes.errors import UnwrapError


T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
P = ParamSpec("P")

__all__: list[str] = ["Result", "collect_results", "fold_results", "partition_results"]


@sum_type(failure="error", success="value")
class Result:
    """Outcome of a computation: ``failure(error)`` or ``success(value)``."""

    @classmethod
    def from_call(cls, f: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Result:
        """Call ``f``, wrapping its return value in ``success`` or a raised exception in ``failure``."""
        try:
            return cls.success(f(*args, **kwargs))
        except Exception as exc:
            return cls.failure(exc)

    def map(self, f: Callable[[Any], U]) -> Result:
        """Map the success value through ``f``. No-op on failure."""
        return self.match(success=lambda value: Result.success(f(value)), failure=self)

    def map_failure(self, f: Callable[[Any], U]) -> Result:
        """Map the error through ``f``. No-op on success."""
        return self.match(success=self, failure=lambda error: Result.failure(f(error)))

    def flat_map(self, f: Callable[[Any], Result]) -> Result:
        """Monadic bind: chain operations that return Result."""
        return self.match(success=f, failure=self)

    and_then = flat_map

    def unwrap(self) -> Any:
        """
        Unwrap the success value.

        Raises:
            UnwrapError: On failure.
        """

        def _raise(error: object) -> NoReturn:
            raise UnwrapError(error)

        return self.match(success=lambda value: value, failure=_raise)

    def unwrap_or(self, default: T) -> Any:
        return self.match(success=lambda value: value, failure=lambda _error: default)

    def unwrap_or_else(self, f: Callable[[Any], U]) -> Any:
        """Return the success value, or call ``f`` on the error."""
        return self.match(success=lambda value: value, failure=f)


def collect_results(results: Sequence[Result]) -> Result:
    """
    Collect a sequence of Results into a Result of list.

    Returns:
        success(list of values) if all succeed, or the first failure
    """
    first_failure = next((result for result in results if result.is_failure()), None)
    if first_failure is not None:
        return first_failure
    return Result.success([result["value"] for result in results])


def partition_results(results: Sequence[Result]) -> tuple[list[Any], list[Any]]:
    """Partition a sequence of Results into (success values, errors)."""
    successes = [result["value"] for result in results if result.is_success()]
    failures = [result["error"] for result in results if result.is_failure()]
    return (successes, failures)


def fold_results(
    items: Sequence[T],
    f: Callable[[A, T], Result],
    initial: A,
) -> Result:
    """
    Functional fold with early exit on first failure.

    Example:
        >>> def add_if_positive(acc, x):
        ...     return Result.success(acc + x) if x > 0 else Result.failure("negative")
        >>> fold_results([1, 2, 3], add_if_positive, 0)
        Success(value=6)
        >>> fold_results([1, -2, 3], add_if_positive, 0)
        Failure(error='negative')
    """
    current: A = initial
    for item in items:
        match f(current, item):
            case Result.Failure() as failure:
                return failure
            case Result.Success(value):
                current = value
            case other:
                raise TypeError(f"fold function must return a Result, got {other!r}")
    return Result.success(current)
