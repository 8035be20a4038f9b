"""
Sum type namespaces.

A namespace is a class shared as the base of every generated variant class.
It exposes, for each alternative:

    * a constructor (``Maybe.just(1)``, ``Maybe.nothing()``);
    * the variant class under its CamelCase name (``Maybe.Just``);
    * an ``is_<name>()`` predicate on every record.

Methods defined on a mixin class passed as ``base`` become members of every
record, and its class/static methods members of the namespace, alongside the
generated ones.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from sumtypes.config import SumTypeConfig
from sumtypes.matcher import build_matcher_class
from sumtypes.parser import Alternative
from sumtypes.strings import snake_to_class
from sumtypes.variant import Variant, build_variant_class


__all__: list[str] = ["build", "variant_class_name", "variant_initializer"]

logger = logging.getLogger(__name__)


def variant_class_name(variant_name: str) -> str:
    return snake_to_class(variant_name)


def variant_initializer(variant_class: type[Variant], memoize: bool = True) -> Callable[..., Variant]:
    """Constructor bound on the namespace for ``variant_class``.

    Zero-field variants share one frozen instance when ``memoize`` is set.
    Pass ``memo=False`` to get a fresh, unfrozen (but equal) instance:

        >>> Maybe.nothing() is Maybe.nothing()  # doctest: +SKIP
        True
        >>> Maybe.nothing(memo=False) is Maybe.nothing()  # doctest: +SKIP
        False

    Variants with fields always build a new instance.
    """
    if variant_class.FIELDS:

        def construct(*values: object) -> Variant:
            return variant_class(*values)

    elif memoize:
        frozen = variant_class().freeze()

        def construct(*values: object, memo: bool = True) -> Variant:
            if memo and not values:
                return frozen
            return variant_class(*values)

    else:

        def construct(*values: object, memo: bool = True) -> Variant:
            return variant_class(*values)

    construct.__name__ = variant_class.VARIANT
    construct.__qualname__ = f"{variant_class.__qualname__.rpartition('.')[0]}.{variant_class.VARIANT}"
    construct.__doc__ = f"Construct a {variant_class.VARIANT} record."
    return construct


def _predicate(variant_name: str) -> Callable[[Variant], bool]:
    def predicate(self: Variant) -> bool:
        return self.VARIANT == variant_name

    predicate.__name__ = f"is_{variant_name}"
    predicate.__doc__ = f"Whether this record is a {variant_name}."
    return predicate


def build(
    alternatives: Sequence[Alternative],
    config: SumTypeConfig,
    base: type | None = None,
) -> type[Variant]:
    """Build the namespace class for ``alternatives``.

    Alternatives are trusted as produced by
    :func:`sumtypes.parser.parse_variant_specs`; nothing is re-validated here.
    """
    bases: tuple[type, ...] = (Variant,) if base is None else (base, Variant)
    attrs: dict[str, object] = {"__slots__": ()} if base is None else {}
    if base is not None:
        attrs.update(
            __module__=base.__module__,
            __qualname__=base.__qualname__,
            __doc__=base.__doc__,
        )
    namespace: type[Variant] = type(config.name, bases, attrs)

    names = tuple(alternative.name for alternative in alternatives)
    namespace.MATCHER = build_matcher_class(names, config.name)
    namespace.ALTERNATIVES = tuple(alternatives)

    variant_classes: list[type[Variant]] = []
    for alternative in alternatives:
        class_name = variant_class_name(alternative.name)
        variant_class = build_variant_class(alternative, namespace, class_name)
        variant_classes.append(variant_class)

        setattr(namespace, class_name, variant_class)
        setattr(namespace, alternative.name, staticmethod(variant_initializer(variant_class, config.memoize)))
        setattr(namespace, f"is_{alternative.name}", _predicate(alternative.name))

    namespace.VARIANTS = tuple(variant_classes)

    logger.debug(f"Declared sum type {config.name} with variants: {', '.join(names)}")
    return namespace
