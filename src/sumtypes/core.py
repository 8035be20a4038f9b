"""
Declaring sum types.

Two equivalent entry points build a sum type namespace:

    >>> Color = define("red", "green", "blue", name="Color")
    >>> Color.red().match(blue=False, _=True)
    True

    >>> @sum_type("empty", cons=("car", "cdr"))
    ... class List:
    ...     @classmethod
    ...     def from_iterable(cls, items):
    ...         result = cls.empty()
    ...         for item in reversed(list(items)):
    ...             result = cls.cons(item, result)
    ...         return result
    >>> List.from_iterable([1, 2]) == List.cons(1, List.cons(2, List.empty()))
    True

Positional string arguments declare zero-field variants; keyword arguments
declare variants with fields, each given one field name or a sequence of them.
A positional mapping adds to the keyword variants, for variants whose
names clash with an option keyword (``name``, ``memoize``, ``base``).
"""

from __future__ import annotations

from typing import Callable, Mapping

from sumtypes.config import build_config
from sumtypes.parser import parse_variant_specs
from sumtypes.sum_type import build
from sumtypes.variant import Variant


__all__: list[str] = ["define", "sum_type"]


def _split_variants(
    variants: tuple[object, ...], field_variants: Mapping[str, object]
) -> tuple[list[object], list[tuple[object, object]]]:
    no_field: list[object] = []
    with_fields: list[tuple[object, object]] = []
    for variant in variants:
        if isinstance(variant, Mapping):
            with_fields.extend(variant.items())
        else:
            no_field.append(variant)
    with_fields.extend(field_variants.items())
    return no_field, with_fields


def define(
    *variants: object,
    name: str = "SumType",
    memoize: bool = True,
    base: type | None = None,
    **field_variants: object,
) -> type[Variant]:
    """Declare a sum type and return its namespace class.

    Args:
        *variants: Zero-field variant names, or mappings of variant name to
            field specification.
        name: Class name of the namespace.
        memoize: Share one frozen instance per zero-field variant.
        base: Mixin whose methods every record (and the namespace) inherits.
        **field_variants: Variant name to a field name or sequence of names.

    Raises:
        DeclarationError: The declaration or the options are invalid.
    """
    config = build_config(name=name, memoize=memoize)
    no_field, with_fields = _split_variants(variants, field_variants)
    alternatives = parse_variant_specs(no_field, with_fields)
    return build(alternatives, config, base)


def sum_type(
    *variants: object, memoize: bool = True, **field_variants: object
) -> Callable[[type], type[Variant]]:
    """Class decorator form of :func:`define`.

    The decorated class supplies the namespace name and custom members.
    """

    def decorate(cls: type) -> type[Variant]:
        return define(*variants, name=cls.__name__, memoize=memoize, base=cls, **field_variants)

    return decorate
