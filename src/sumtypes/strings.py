"""Name helpers for generated variant classes."""

from __future__ import annotations


__all__: list[str] = ["snake_to_class"]


def snake_to_class(snake_case_name: str) -> str:
    """Convert a lower_snake_case name to its CamelCase class name.

    Example:
        >>> snake_to_class("left_value")
        'LeftValue'
    """
    return "".join(part.capitalize() for part in snake_case_name.split("_"))
