# SPDX-License-Identifier: MIT
"""Helpers shared by the range dialect processors."""

from __future__ import annotations

from typing import Optional

from ..range import RangeOperator

# Stands in for a wildcarded (x, X, *, +, or missing) version part
X_RANGE_MARKER = -1

_WILDCARDS = frozenset({"x", "X", "*", "+"})

ALL_RANGE = f"{RangeOperator.GTE.symbol}0.0.0"
# No version is lower than 0.0.0
NO_RANGE = f"{RangeOperator.LT.symbol}0.0.0"

GTE = RangeOperator.GTE.symbol
GT = RangeOperator.GT.symbol
LTE = RangeOperator.LTE.symbol
LT = RangeOperator.LT.symbol
EQ = RangeOperator.EQ.symbol


def parse_int_with_x_support(identifier: Optional[str]) -> int:
    """Parse a version part, mapping wildcards and blanks to X_RANGE_MARKER.

    Examples:
        >>> parse_int_with_x_support("12")
        12
        >>> parse_int_with_x_support("X")
        -1
        >>> parse_int_with_x_support(None)
        -1
    """
    if identifier is None or not identifier.strip() or identifier in _WILDCARDS:
        return X_RANGE_MARKER
    return int(identifier)


def is_x(value: int) -> bool:
    return value == X_RANGE_MARKER
