# tests/test_sum_type.py
"""
Tests for sum type namespaces and the ``define`` / ``sum_type`` entry points.
"""

from __future__ import annotations

import logging

import pytest

from sumtypes import (
    DuplicateNameError,
    InvalidConfigError,
    SumTypeConfig,
    Variant,
    VariantArgsError,
    VariantNameError,
    define,
    sum_type,
)
from sumtypes.parser import Alternative
from sumtypes.sum_type import build, variant_class_name
from tests.helpers import Color, Either, List


@sum_type("nothing", just="value")
class Option:
    """Maybe-like type with custom members."""

    @classmethod
    def of(cls, value: object) -> Option:
        return cls.nothing() if value is None else cls.just(value)

    def or_else(self, other: object) -> object:
        return self["value"] if self.is_just() else other


class TestZeroFieldConstructors:
    """Tests for memoized zero-field constructors."""

    def test_same_object_unless_overridden(self) -> None:
        """Default calls share one instance; ``memo=False`` builds a new one."""
        nothing = Option.nothing()
        fresh = Option.nothing(memo=False)

        assert isinstance(nothing, Option.Nothing)
        assert isinstance(fresh, Option.Nothing)

        assert nothing == Option.Nothing()
        assert fresh == Option.Nothing()
        assert nothing != Option.just(1)
        assert fresh != Option.just(1)

        assert nothing is Option.nothing()
        assert fresh is not Option.nothing()
        assert nothing is not Option.Nothing()

    def test_memoize_disabled_for_sum_type(self) -> None:
        """``memoize=False`` gives a fresh, unfrozen instance on every call."""
        Flag = define("on", "off", name="Flag", memoize=False)
        assert Flag.on() is not Flag.on()
        assert Flag.on() == Flag.on()
        assert not Flag.on().frozen


class TestFieldConstructors:
    """Tests for constructors of variants with fields."""

    def test_new_instance_for_each_call(self) -> None:
        just = Option.just(1)
        assert just == Option.Just(1)
        assert just != Option.Just(2)
        assert just != Option.nothing()
        assert just is not Option.just(1)


class TestGeneratedMembers:
    """Tests for generated classes, constants and predicates."""

    def test_class_names(self) -> None:
        assert Option.Nothing.VARIANT == "nothing"
        assert Option.Just.VARIANT == "just"
        assert Option.Nothing.__name__ == "Nothing"
        assert Option.Just.__qualname__.endswith("Option.Just")

    def test_variant_class_name(self) -> None:
        assert variant_class_name("left_value") == "LeftValue"

    def test_variants_and_alternatives_in_declared_order(self) -> None:
        assert Option.VARIANTS == (Option.Nothing, Option.Just)
        assert Option.ALTERNATIVES == (
            Alternative("nothing"),
            Alternative("just", ("value",)),
        )

    def test_namespace_is_common_base(self) -> None:
        for variant_class in Option.VARIANTS:
            assert issubclass(variant_class, Option)
            assert issubclass(variant_class, Variant)

    def test_constructor_metadata(self) -> None:
        assert Option.just.__name__ == "just"

    def test_match_args(self) -> None:
        """Records support structural pattern matching on their fields."""
        match Either.right(5):
            case Either.Left(value):
                result = ("left", value)
            case Either.Right(value):
                result = ("right", value)
        assert result == ("right", 5)


class TestCustomMembers:
    """Tests for members supplied at declaration time."""

    def test_class_methods(self) -> None:
        assert Option.of(None) == Option.Nothing()
        assert Option.of("sym") == Option.Just("sym")

    def test_instance_methods(self) -> None:
        assert Option.nothing().or_else("other") == "other"
        assert Option.just("str").or_else("other") == "str"

    def test_base_mixin_with_define(self) -> None:
        class Named:
            def describe(self) -> str:
                return f"<{self.render()}>"

        Shape = define(circle="radius", name="Shape", base=Named)
        assert Shape.circle(2).describe() == "<circle radius=2>"
        assert isinstance(Shape.circle(2), Named)

    def test_decorated_class_keeps_name_and_doc(self) -> None:
        assert Option.__name__ == "Option"
        assert Option.__doc__ == "Maybe-like type with custom members."


class TestDefine:
    """End-to-end tests for ``define``."""

    def test_malformed_variant_raises(self) -> None:
        with pytest.raises(VariantNameError):
            define("String", "args")

    def test_only_zero_field_variants(self) -> None:
        """Color: three zero-field variants and a custom predicate."""
        assert str(Color.red()) == "red"
        assert Color.red().is_not_blue()
        assert Color.green().is_not_blue()
        assert not Color.blue().is_not_blue()

    def test_only_field_variants(self) -> None:
        """Either: from_call wraps values and exceptions; map follows right."""
        assert str(Either.left("uh oh")) == "left value=uh oh"
        assert Either.from_call(lambda: "yay")["value"] == "yay"
        assert Either.right(1).map(lambda x: x + 1) == Either.right(2)
        assert Either.left(1).map(str) == Either.left(1)

        err = ValueError("boom")

        def explode() -> object:
            raise err

        assert Either.from_call(explode) == Either.left(err)

    def test_mixed_variants(self) -> None:
        """List: building from [1, 2, 3] nests cons cells ending in empty."""
        assert List.from_iterable([1, 2, 3]) == List.cons(
            1, List.cons(2, List.cons(3, List.empty()))
        )

    def test_mapping_declares_field_variants(self) -> None:
        """Variants named like an option keyword are declared via a mapping."""
        Tagged = define("none", {"name": "text", "base": ["x", "y"]}, name="Tagged")
        assert Tagged.name("a")["text"] == "a"
        assert Tagged.base(1, 2).members() == [1, 2]
        assert Tagged.none().is_none()

    def test_duplicate_names_raise(self) -> None:
        with pytest.raises(DuplicateNameError, match="Duplicated names: red"):
            define("red", red="value")

    @pytest.mark.parametrize(
        ("variants", "field_variants"),
        [
            (({"a": "x"},), {"a": "y"}),
            (({"a": "x"}, {"a": ("y", "z")}), {}),
        ],
    )
    def test_repeated_field_variant_raises(
        self, variants: tuple[object, ...], field_variants: dict[str, object]
    ) -> None:
        """A variant given in a mapping and again elsewhere is not overwritten."""
        with pytest.raises(DuplicateNameError, match="Duplicated names: a"):
            define(*variants, **field_variants)

    def test_variant_named_alternative_rejected(self) -> None:
        with pytest.raises(VariantNameError):
            define("alternative", "primary", name="Kind")

    def test_bad_field_spec_raises(self) -> None:
        with pytest.raises(VariantArgsError):
            define(point=3)

    @pytest.mark.parametrize(
        "options",
        [{"name": "not an identifier"}, {"name": ""}, {"memoize": "yes"}],
    )
    def test_invalid_options_raise(self, options: dict[str, object]) -> None:
        with pytest.raises(InvalidConfigError):
            define("a", **options)  # type: ignore[arg-type]

    def test_declaration_is_logged(self, debug_logs: pytest.LogCaptureFixture) -> None:
        define("up", "down", name="Direction")
        messages = [
            record.getMessage()
            for record in debug_logs.records
            if record.name == "sumtypes.sum_type" and record.levelno == logging.DEBUG
        ]
        assert "Declared sum type Direction with variants: up, down" in messages


class TestBuild:
    """Tests for building a namespace from trusted alternatives."""

    def test_build_trusts_alternatives(self) -> None:
        namespace = build(
            (Alternative("leaf", ("value",)), Alternative("node", ("left", "right"))),
            SumTypeConfig(name="Tree"),
        )
        tree = namespace.node(namespace.leaf(1), namespace.leaf(2))
        total = tree.match(
            leaf=lambda value: value,
            node=lambda left, right: left["value"] + right["value"],
        )
        assert total == 3
