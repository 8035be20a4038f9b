"""Validated declaration options for sum types."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sumtypes.errors import InvalidConfigError


__all__: list[str] = ["SumTypeConfig", "build_config"]


class SumTypeConfig(BaseModel):
    """Options accepted by :func:`sumtypes.define`.

    Attributes
    ----------
    name
        Class name of the generated namespace; must be a Python identifier.
    memoize
        Whether zero-field constructors share one frozen instance.
    """

    name: Annotated[str, Field(min_length=1, pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")] = "SumType"
    memoize: bool = True

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)


def build_config(**options: object) -> SumTypeConfig:
    """Construct a :class:`SumTypeConfig`, raising ``InvalidConfigError`` on bad input."""
    try:
        return SumTypeConfig.model_validate(options)
    except ValidationError as exc:
        raise InvalidConfigError(str(exc)) from exc
