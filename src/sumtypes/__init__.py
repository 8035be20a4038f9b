"""
Sum types with exhaustive, runtime-checked pattern matching.

A sum type is a closed set of named alternatives, each with a fixed, ordered
list of fields. Values are records of exactly one alternative, and are
interrogated through match expressions that must cover every alternative
exactly once or end with a wildcard (``_``):

    >>> from sumtypes import define
    >>> Shape = define(circle="radius", rect=("width", "height"), name="Shape")
    >>> area = Shape.rect(2, 3).match(
    ...     circle=lambda radius: 3.14159 * radius**2,
    ...     rect=lambda width, height: width * height,
    ... )
    >>> area
    6

Malformed match expressions fail immediately with a :class:`MatchError`
naming the offending alternatives.
"""

from __future__ import annotations

from sumtypes.config import SumTypeConfig
from sumtypes.core import define, sum_type
from sumtypes.errors import (
    ArityError,
    DeclarationError,
    DuplicateMatchError,
    DuplicateNameError,
    InvalidConfigError,
    MatchAfterWildcardError,
    MatchError,
    SumTypeError,
    UnknownAlternativeError,
    UnknownFieldError,
    UnmatchedVariantError,
    UnwrapError,
    VariantArgsError,
    VariantError,
    VariantNameError,
)
from sumtypes.functions import const
from sumtypes.matcher import WILDCARD, Matcher, MatchState
from sumtypes.maybe import Maybe
from sumtypes.parser import Alternative
from sumtypes.result import Result, collect_results, fold_results, partition_results
from sumtypes.variant import Variant

__version__ = "0.1.0"

__all__ = [
    "Alternative",
    "ArityError",
    "DeclarationError",
    "DuplicateMatchError",
    "DuplicateNameError",
    "InvalidConfigError",
    "MatchAfterWildcardError",
    "MatchError",
    "MatchState",
    "Matcher",
    "Maybe",
    "Result",
    "SumTypeConfig",
    "SumTypeError",
    "UnknownAlternativeError",
    "UnknownFieldError",
    "UnmatchedVariantError",
    "UnwrapError",
    "Variant",
    "VariantArgsError",
    "VariantError",
    "VariantNameError",
    "WILDCARD",
    "collect_results",
    "const",
    "define",
    "fold_results",
    "partition_results",
    "sum_type",
]
