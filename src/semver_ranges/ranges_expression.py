# SPDX-License-Identifier: MIT
"""Fluent construction of a RangesList without going through a range string.

Example:
    >>> from semver_ranges.ranges_expression import equal, greater, less
    >>> expression = equal("1.0.0").or_(greater("2.0.0").and_(less("3.0.0")))
    >>> str(expression.get())
    '=1.0.0 or (>2.0.0 and <3.0.0)'
"""

from __future__ import annotations

from typing import Union

from .range import Range, RangeOperator
from .ranges_list import RangesList
from .semver import Semver


class RangesExpression:
    """Builder holding a pending AND-group and the finished OR-list.

    ``and_`` extends the pending group; ``or_`` closes it and starts a new
    one. ``get`` closes any pending group and returns the RangesList.
    """

    def __init__(self, range_: Range) -> None:
        self._ranges_list = RangesList()
        self._pending: list[Range] = [range_]

    def and_(self, expression: RangesExpression) -> RangesExpression:
        """AND this expression with another.

        When ``expression`` holds several OR-groups, each of them is flushed
        on its own so that its OR structure is kept.
        """
        groups = expression.get().get()
        for ranges in groups:
            self._pending.extend(ranges)
            if len(groups) > 1:
                self._flush()
        return self

    def or_(self, expression: RangesExpression) -> RangesExpression:
        """OR this expression with another."""
        self._flush()
        return self.and_(expression)

    def get(self) -> RangesList:
        if self._pending:
            self._flush()
        return self._ranges_list

    def __str__(self) -> str:
        return str(self.get())

    def _flush(self) -> None:
        self._ranges_list.add(self._pending)
        self._pending = []


def _expression(version: Union[Semver, str], operator: RangeOperator) -> RangesExpression:
    return RangesExpression(Range.of(version, operator))


def equal(version: Union[Semver, str]) -> RangesExpression:
    return _expression(version, RangeOperator.EQ)


def greater(version: Union[Semver, str]) -> RangesExpression:
    return _expression(version, RangeOperator.GT)


def greater_or_equal(version: Union[Semver, str]) -> RangesExpression:
    return _expression(version, RangeOperator.GTE)


def less(version: Union[Semver, str]) -> RangesExpression:
    return _expression(version, RangeOperator.LT)


def less_or_equal(version: Union[Semver, str]) -> RangesExpression:
    return _expression(version, RangeOperator.LTE)
