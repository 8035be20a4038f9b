# tests/helpers/__init__.py
"""Shared test utilities for the sumtypes test suite.

Usage:
    from tests.helpers import Color, List, expect_success
"""

from __future__ import annotations

from tests.helpers.result_utils import expect_failure, expect_success
from tests.helpers.types import Color, Either, List, Pair

__all__ = [
    "Color",
    "Either",
    "List",
    "Pair",
    "expect_failure",
    "expect_success",
]
