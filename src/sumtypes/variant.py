"""
Variant records: fixed-arity tagged containers with named fields.

Each declared alternative gets its own subclass of :class:`Variant`, built once
at declaration time by :func:`build_variant_class`. The subclass carries the
alternative's descriptor and one property per field; instances hold only the
ordered list of field values.

Records are mutable (fields can be reassigned) and therefore unhashable,
following the dataclass convention for ``eq=True`` classes that are not
frozen. Zero-field singletons handed out by memoizing constructors are frozen.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from typing import TYPE_CHECKING, Callable, ClassVar, Mapping

from sumtypes.errors import ArityError, UnknownFieldError
from sumtypes.parser import Alternative

if TYPE_CHECKING:
    from sumtypes.matcher import Matcher


__all__: list[str] = ["Variant", "build_variant_class"]


class Variant:
    """Base class of every generated variant record.

    Class attributes set on generated subclasses:
        ALTERNATIVE: The :class:`Alternative` descriptor.
        VARIANT: The alternative's name.
        FIELDS: The alternative's field names, in declared order.
        MATCHER: Matcher class shared by the whole sum type.

    Class attributes set on the sum type namespace:
        ALTERNATIVES: Every alternative descriptor, in declared order.
        VARIANTS: Every generated variant class, in declared order.
    """

    __slots__ = ("_values", "_frozen")

    ALTERNATIVE: ClassVar[Alternative]
    VARIANT: ClassVar[str]
    FIELDS: ClassVar[tuple[str, ...]] = ()
    MATCHER: ClassVar[type[Matcher]]
    ALTERNATIVES: ClassVar[tuple[Alternative, ...]] = ()
    VARIANTS: ClassVar[tuple[type[Variant], ...]] = ()

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *values: object) -> None:
        if len(values) != len(self.FIELDS):
            raise ArityError(self.VARIANT, expected=len(self.FIELDS), given=len(values))
        object.__setattr__(self, "_values", list(values))
        object.__setattr__(self, "_frozen", False)

    def __setattr__(self, name: str, value: object) -> None:
        if getattr(self, "_frozen", False):
            raise FrozenInstanceError(f"cannot assign to field {name!r} of frozen {self.VARIANT}")
        super().__setattr__(name, value)

    # ------------------------------------------------------------------ #
    # Field access                                                       #
    # ------------------------------------------------------------------ #

    def _index_for_key(self, key: object) -> int:
        match key:
            case bool():
                pass
            case int() if 0 <= key < len(self.FIELDS):
                return key
            case str() if key in self.FIELDS:
                return self.FIELDS.index(key)
        raise UnknownFieldError(self.VARIANT, key)

    def __getitem__(self, key: str | int) -> object:
        return self._values[self._index_for_key(key)]

    def __setitem__(self, key: str | int, value: object) -> None:
        idx = self._index_for_key(key)
        if self._frozen:
            raise FrozenInstanceError(f"cannot assign to field {key!r} of frozen {self.VARIANT}")
        self._values[idx] = value

    def get(self, key: str | int) -> object:
        """Field value for a field name or position."""
        return self[key]

    def set(self, key: str | int, value: object) -> None:
        """Replace the value of a field given by name or position."""
        self[key] = value

    def members(self, copy: bool = True) -> list[object]:
        """Field values in declared order.

        ``copy=False`` returns the record's own list; callers must not mutate it.
        """
        return list(self._values) if copy else self._values

    to_list = members

    def attributes(self) -> dict[str, object]:
        return dict(zip(self.FIELDS, self._values))

    def to_dict(self, include_root: bool = True) -> dict[str, object]:
        """``{variant: attributes}``, or bare attributes when ``include_root`` is false."""
        if include_root:
            return {self.VARIANT: self.attributes()}
        return self.attributes()

    # ------------------------------------------------------------------ #
    # Identity                                                           #
    # ------------------------------------------------------------------ #

    def is_alternative(self, name: str) -> bool:
        return name == self.VARIANT

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> Variant:
        object.__setattr__(self, "_frozen", True)
        return self

    def copy(self) -> Variant:
        """Unfrozen shallow copy of this record."""
        return type(self)(*self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Variant):
            return NotImplemented
        return type(other) is type(self) and other._values == self._values

    def render(self) -> str:
        """Human-readable form, e.g. ``pair first=left, second=right``."""
        if not self.FIELDS:
            return self.VARIANT
        pairs = ", ".join(f"{name}={value}" for name, value in zip(self.FIELDS, self._values))
        return f"{self.VARIANT} {pairs}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        pairs = ", ".join(f"{name}={value!r}" for name, value in zip(self.FIELDS, self._values))
        return f"{type(self).__name__}({pairs})"

    # ------------------------------------------------------------------ #
    # Matching                                                           #
    # ------------------------------------------------------------------ #

    def match(
        self,
        cases: Mapping[str, object] | Callable[[Matcher], object] | None = None,
        /,
        **branches: object,
    ) -> object:
        """Match this record exhaustively and return the applicable branch.

        Three forms are accepted:

            >>> color.match({"blue": False, "_": True})  # doctest: +SKIP
            >>> color.match(blue=False, _=True)  # doctest: +SKIP
            >>> color.match(lambda m: m.blue(False)._(True))  # doctest: +SKIP

        Branch values that are callable are invoked as handlers: alternative
        handlers receive the field values positionally, the wildcard handler
        receives the record.

        Raises:
            UnknownAlternativeError: A mapping key names no alternative.
            DuplicateMatchError: An alternative is handled twice.
            MatchAfterWildcardError: Anything is handled after the wildcard.
            UnmatchedVariantError: Coverage is incomplete and no wildcard applied.
        """
        matcher = self.MATCHER(self)
        if callable(cases):
            if branches:
                raise TypeError("match() takes either a callback or branches, not both")
            cases(matcher)
        elif cases is not None and branches:
            raise TypeError("match() takes either a mapping or keyword branches, not both")
        else:
            matcher._match_mapping(cases if cases is not None else branches)
        return matcher._fetch_result()


def _field_property(variant: str, idx: int, name: str) -> property:
    def getter(self: Variant) -> object:
        return self._values[idx]

    def setter(self: Variant, value: object) -> None:
        self[idx] = value

    return property(getter, setter, doc=f"Field {name} of variant {variant}.")


def build_variant_class(
    alternative: Alternative,
    namespace: type[Variant],
    class_name: str,
) -> type[Variant]:
    """Generate the record class for ``alternative`` under ``namespace``."""
    attrs: dict[str, object] = {
        "__slots__": (),
        "__match_args__": alternative.fields,
        "__module__": namespace.__module__,
        "__qualname__": f"{namespace.__qualname__}.{class_name}",
        "ALTERNATIVE": alternative,
        "VARIANT": alternative.name,
        "FIELDS": alternative.fields,
    }
    attrs.update(
        (name, _field_property(alternative.name, idx, name))
        for idx, name in enumerate(alternative.fields)
    )
    return type(class_name, (namespace,), attrs)
