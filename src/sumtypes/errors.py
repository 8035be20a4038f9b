# src/sumtypes/errors.py
"""Exception hierarchy for sum type declaration, construction and matching.

Every error here signals a programming mistake. They are raised at the point
of misuse and never caught internally.
"""

from __future__ import annotations

from typing import Sequence


class SumTypeError(Exception):
    """Base exception for all sumtypes errors."""

    pass


# --------------------------------------------------------------------------- #
# Variant construction and field access                                       #
# --------------------------------------------------------------------------- #


class VariantError(SumTypeError):
    """Misuse of a variant record."""

    pass


class ArityError(VariantError, TypeError):
    """Constructor called with the wrong number of field values."""

    def __init__(self, variant: str, expected: int, given: int) -> None:
        self.variant = variant
        self.expected = expected
        self.given = given
        super().__init__(
            f"wrong number of arguments for variant {variant} "
            f"(given {given}, expected {expected})"
        )


class UnknownFieldError(VariantError, LookupError):
    """Field accessor or mutator given an undeclared key."""

    def __init__(self, variant: str, key: object) -> None:
        self.variant = variant
        self.key = key
        super().__init__(f"No member '{key}' in variant {variant}")


# --------------------------------------------------------------------------- #
# Matching                                                                    #
# --------------------------------------------------------------------------- #


class MatchError(SumTypeError):
    """Malformed match expression."""

    pass


class UnknownAlternativeError(MatchError):
    """Declarative match mapping names an alternative the sum type lacks."""

    def __init__(self, unknown: Sequence[str], valid: Sequence[str]) -> None:
        self.unknown = tuple(unknown)
        self.valid = tuple(valid)
        super().__init__(
            f"Unknown variant(s): {', '.join(map(str, self.unknown))}; "
            f"valid variant(s) are: {', '.join(self.valid)}"
        )


class DuplicateMatchError(MatchError):
    """The same alternative was handled twice in one match expression."""

    def __init__(self, variant: str) -> None:
        self.variant = variant
        super().__init__(f"Duplicated match for variant: {variant}")


class MatchAfterWildcardError(MatchError):
    """An alternative, or a second wildcard, was handled after the wildcard."""

    def __init__(self, variant: str) -> None:
        self.variant = variant
        super().__init__(f"Attempted to match variant after wildcard (_): {variant}")


class UnmatchedVariantError(MatchError):
    """Result requested without full coverage and without a wildcard."""

    def __init__(self, unmatched: Sequence[str]) -> None:
        self.unmatched = tuple(unmatched)
        super().__init__(
            f"Did not match the following variants: {', '.join(self.unmatched)}"
        )


# --------------------------------------------------------------------------- #
# Declaration                                                                 #
# --------------------------------------------------------------------------- #


class DeclarationError(SumTypeError):
    """Sum type declaration rejected by the parser."""

    pass


class VariantNameError(DeclarationError):
    """Variant or field name is malformed or collides with a generated member."""

    def __init__(self, name: object, reason: str) -> None:
        self.name = name
        super().__init__(f"{reason}: {name!r}")


class VariantArgsError(DeclarationError):
    """Field specification is neither a name nor a sequence of names."""

    def __init__(self, variant: str, spec: object) -> None:
        self.variant = variant
        self.spec = spec
        super().__init__(
            f"Expected a field name or a sequence of field names for "
            f"variant {variant}, got: {spec!r}"
        )


class DuplicateNameError(DeclarationError):
    """A variant or field name was declared more than once."""

    def __init__(self, duplicates: Sequence[str]) -> None:
        self.duplicates = tuple(duplicates)
        super().__init__(f"Duplicated names: {', '.join(self.duplicates)}")


class InvalidConfigError(DeclarationError):
    """Declaration options failed validation."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid sum type options: {message}")


# --------------------------------------------------------------------------- #
# Ready-made types                                                            #
# --------------------------------------------------------------------------- #


class UnwrapError(SumTypeError):
    """Called unwrap() on a failure."""

    def __init__(self, error: object) -> None:
        self.error = error
        super().__init__(f"Called unwrap() on failure: {error}")


__all__ = [
    "SumTypeError",
    "VariantError",
    "ArityError",
    "UnknownFieldError",
    "MatchError",
    "UnknownAlternativeError",
    "DuplicateMatchError",
    "MatchAfterWildcardError",
    "UnmatchedVariantError",
    "DeclarationError",
    "VariantNameError",
    "VariantArgsError",
    "DuplicateNameError",
    "InvalidConfigError",
    "UnwrapError",
]
