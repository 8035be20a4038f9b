"""
Validation and normalization of sum type declarations.

A declaration is a list of zero-field variant names plus a mapping from
variant name to its field specification (a single field name or a sequence
of names). The parser checks every name and produces the canonical, ordered
tuple of :class:`Alternative` descriptors the rest of the package trusts
without re-validation.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Final, Iterable, Mapping, Sequence

from sumtypes.errors import DuplicateNameError, VariantArgsError, VariantNameError


__all__: list[str] = [
    "Alternative",
    "parse_variant_specs",
    "validate_unique",
    "validate_name_format",
    "validate_variant_args",
]

LOWER_SNAKE_CASE: Final[re.Pattern[str]] = re.compile(r"\A[a-z]+(_[a-z]+)*\Z")

# Record and namespace API that generated members must not shadow.
RESERVED_NAMES: Final[frozenset[str]] = frozenset(
    {
        "attributes",
        "copy",
        "freeze",
        "frozen",
        "get",
        "is_alternative",
        "match",
        "members",
        "render",
        "set",
        "to_dict",
        "to_list",
    }
)


@dataclass(frozen=True)
class Alternative:
    """One declared member of a sum type.

    Attributes:
        name: lower_snake_case name, unique within its sum type.
        fields: Ordered field names, unique within this alternative.
    """

    name: str
    fields: tuple[str, ...] = ()

    @property
    def arity(self) -> int:
        return len(self.fields)


def validate_unique(names: Iterable[str]) -> None:
    """Raise ``DuplicateNameError`` listing every name seen more than once."""
    duplicates = [name for name, count in Counter(names).items() if count > 1]
    if duplicates:
        raise DuplicateNameError(duplicates)


def validate_name_format(name: object) -> str:
    """Return ``name`` if it is a lower_snake_case string."""
    if not isinstance(name, str):
        raise VariantNameError(name, "Expected a str")
    if LOWER_SNAKE_CASE.match(name) is None:
        raise VariantNameError(name, "Name is not lower_snake_case")
    if name in RESERVED_NAMES:
        raise VariantNameError(name, "Name is reserved")
    return name


def validate_variant_args(variant: str, spec: object) -> tuple[str, ...]:
    """Normalize a field specification to a tuple of validated field names."""
    match spec:
        case str():
            return (validate_name_format(spec),)
        case list() | tuple():
            fields = tuple(validate_name_format(field) for field in spec)
            validate_unique(fields)
            return fields
        case _:
            raise VariantArgsError(variant, spec)


def parse_variant_specs(
    no_field_variants: Sequence[object],
    field_variants: Mapping[str, object] | Iterable[tuple[object, object]],
) -> tuple[Alternative, ...]:
    """Validate a declaration and return its alternatives in declared order.

    Zero-field variants come first, followed by variants with fields.
    ``field_variants`` may also be a sequence of ``(name, spec)`` pairs, so a
    name given twice is reported rather than overwritten.

    Raises:
        VariantNameError: A variant or field name is not lower_snake_case, or
            it would shadow the record API or a generated ``is_<name>``
            predicate.
        DuplicateNameError: A variant name (or a field name within one
            variant) is declared twice.
        VariantArgsError: A field specification has the wrong shape.

    Example:
        >>> parse_variant_specs(["nothing"], {"just": "value"})
        (Alternative(name='nothing', fields=()), Alternative(name='just', fields=('value',)))
    """
    pairs = list(field_variants.items() if isinstance(field_variants, Mapping) else field_variants)
    checked = [validate_name_format(name) for name in [*no_field_variants, *(n for n, _ in pairs)]]
    validate_unique(checked)

    predicates = {f"is_{name}" for name in checked}
    for name in checked:
        if f"is_{name}" in RESERVED_NAMES:
            raise VariantNameError(name, "Predicate name is reserved")

    with_fields = [
        Alternative(name, validate_variant_args(name, spec))
        for name, (_, spec) in zip(checked[len(no_field_variants) :], pairs)
    ]
    for alternative in with_fields:
        for field in alternative.fields:
            if field in predicates:
                raise VariantNameError(field, "Field name shadows a variant predicate")

    return (
        *(Alternative(name) for name in checked[: len(no_field_variants)]),
        *with_fields,
    )
