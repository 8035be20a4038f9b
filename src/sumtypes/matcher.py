"""
Exhaustiveness-checked matching over variant records.

A match expression threads an immutable :class:`MatchState` through one
transition per handled branch. The transitions are pure functions so the
coverage rules can be exercised without any record at all:

    * an alternative may be handled at most once;
    * nothing, including a second wildcard, may follow the wildcard (``_``);
    * the result is available only once every alternative is handled or the
      wildcard has been applied.

:class:`Matcher` wraps the state for callers. A subclass is generated per sum
type with one method per alternative, so chained matching reads like the
declaration:

    >>> color.match(lambda m: m.red("stop").green("go")._("wait"))  # doctest: +SKIP

Matcher internals are prefixed with ``_`` so they never collide with variant
names, which are always lower_snake_case.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Callable, ClassVar, Final, Mapping, Sequence

from sumtypes.errors import (
    DuplicateMatchError,
    MatchAfterWildcardError,
    UnknownAlternativeError,
    UnmatchedVariantError,
)

if TYPE_CHECKING:
    from sumtypes.variant import Variant


__all__: list[str] = [
    "WILDCARD",
    "MatchState",
    "Matcher",
    "build_matcher_class",
    "fetch_result",
    "handle_alternative",
    "handle_wildcard",
    "open_state",
]

WILDCARD: Final[str] = "_"


@dataclass(frozen=True)
class MatchState:
    """Coverage bookkeeping for one match expression.

    Attributes:
        variant: Alternative name of the record being matched.
        alternatives: Every alternative name of the sum type, in declared order.
        handled: Alternative names handled so far, in the order handled.
        wildcard_matched: Whether the wildcard has been applied.
        matched: Whether the record's own alternative has been handled.
        result: Value of the branch that applied, ``None`` until one does.
    """

    variant: str
    alternatives: tuple[str, ...]
    handled: tuple[str, ...] = ()
    wildcard_matched: bool = False
    matched: bool = False
    result: object = None

    @property
    def satisfied(self) -> bool:
        return self.matched or self.wildcard_matched

    @property
    def unmatched(self) -> tuple[str, ...]:
        return tuple(name for name in self.alternatives if name not in self.handled)


def open_state(variant: str, alternatives: Sequence[str]) -> MatchState:
    """Initial state for matching a record of alternative ``variant``."""
    return MatchState(variant=variant, alternatives=tuple(alternatives))


def _apply(branch: object, *args: object) -> object:
    return branch(*args) if callable(branch) else branch


def handle_alternative(
    state: MatchState,
    name: str,
    branch: object,
    fields: Sequence[object] = (),
) -> MatchState:
    """Handle alternative ``name`` with a literal or handler ``branch``.

    The handler is invoked with ``fields`` spread positionally only when
    ``name`` is the record's own alternative. Any other name is recorded for
    coverage and its branch left untouched.

    Raises:
        MatchAfterWildcardError: The wildcard was already applied.
        DuplicateMatchError: ``name`` was already handled.
    """
    if state.wildcard_matched:
        raise MatchAfterWildcardError(name)
    if name in state.handled:
        raise DuplicateMatchError(name)

    handled = (*state.handled, name)
    if name != state.variant:
        return replace(state, handled=handled)

    return replace(state, handled=handled, matched=True, result=_apply(branch, *fields))


def handle_wildcard(state: MatchState, branch: object, record: object = None) -> MatchState:
    """Apply the wildcard; its handler receives the whole ``record``.

    When the record's own alternative was already handled the wildcard is
    recorded and its branch discarded.

    Raises:
        MatchAfterWildcardError: The wildcard was already applied.
    """
    if state.wildcard_matched:
        raise MatchAfterWildcardError(WILDCARD)
    if state.matched:
        return replace(state, wildcard_matched=True)
    return replace(state, wildcard_matched=True, result=_apply(branch, record))


def fetch_result(state: MatchState) -> object:
    """Return the result of a fully covered match expression.

    Raises:
        UnmatchedVariantError: Some alternatives were not handled and no
            wildcard was applied.
    """
    if state.wildcard_matched:
        return state.result
    unmatched = state.unmatched
    if unmatched:
        raise UnmatchedVariantError(unmatched)
    return state.result


class Matcher:
    """Accumulator for a single match expression against one record.

    Never reuse a matcher after its result has been fetched.
    """

    ALTERNATIVES: ClassVar[tuple[str, ...]] = ()

    def __init__(self, record: Variant) -> None:
        self._record = record
        self._state = open_state(record.VARIANT, self.ALTERNATIVES)

    @property
    def _match_state(self) -> MatchState:
        return self._state

    def _handle(self, name: str, value: object = None) -> Matcher:
        self._state = handle_alternative(
            self._state, name, value, self._record.members(copy=False)
        )
        return self

    def _(self, value: object = None) -> Matcher:
        """Wildcard branch; a handler receives the whole record."""
        self._state = handle_wildcard(self._state, value, self._record)
        return self

    def _match_mapping(self, cases: Mapping[str, object]) -> Matcher:
        """Apply every branch of ``cases`` in the caller's order.

        Raises:
            UnknownAlternativeError: Before any branch is applied, if a key is
                neither an alternative nor the wildcard.
        """
        unknown = [key for key in cases if key != WILDCARD and key not in self.ALTERNATIVES]
        if unknown:
            raise UnknownAlternativeError(unknown, self.ALTERNATIVES)

        for name, value in cases.items():
            if name == WILDCARD:
                self._(value)
            else:
                self._handle(name, value)
        return self

    def _fetch_result(self) -> object:
        return fetch_result(self._state)


def _alternative_method(name: str) -> Callable[..., Matcher]:
    def method(self: Matcher, value: object = None) -> Matcher:
        return self._handle(name, value)

    method.__name__ = name
    method.__qualname__ = f"Matcher.{name}"
    method.__doc__ = f"Handle the {name} alternative with a literal or handler."
    return method


def build_matcher_class(alternatives: Sequence[str], type_name: str = "SumType") -> type[Matcher]:
    """Generate the matcher subclass for a sum type with ``alternatives``."""
    namespace: dict[str, object] = {name: _alternative_method(name) for name in alternatives}
    namespace["ALTERNATIVES"] = tuple(alternatives)
    return type(f"{type_name}Matcher", (Matcher,), namespace)
