# SPDX-License-Identifier: MIT
"""A single comparator constraint such as ``>=1.2.3``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .exceptions import RangeOperatorError
from .semver import Semver


class RangeOperator(Enum):
    """Comparison operator of a Range, valued by its symbol."""

    EQ = "="
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def value_of(cls, symbol: str) -> RangeOperator:
        """Look up an operator by symbol; the empty string means EQ.

        Raises:
            RangeOperatorError: If the symbol is not a known operator
        """
        if not symbol:
            return cls.EQ
        try:
            return cls(symbol)
        except ValueError:
            raise RangeOperatorError(symbol) from None


@dataclass(frozen=True)
class Range:
    """Represents a single range item: an operator applied to a version."""

    range_version: Semver
    range_operator: RangeOperator

    @classmethod
    def of(cls, range_version: Union[Semver, str], range_operator: RangeOperator) -> Range:
        """Build a Range, parsing the version if given as a string."""
        if isinstance(range_version, str):
            range_version = Semver.of(range_version)
        return cls(range_version, range_operator)

    @property
    def is_satisfied_by_any(self) -> bool:
        """True for ``>=0.0.0``, which every version satisfies."""
        return self.range_operator is RangeOperator.GTE and self.range_version == Semver.ZERO

    def is_satisfied_by(self, version: Union[Semver, str]) -> bool:
        """Check whether the version satisfies this single constraint.

        Args:
            version: A Semver or a valid semver string

        Raises:
            SemverError: If a version string is not valid semver
        """
        if isinstance(version, str):
            version = Semver.of(version)

        if self.range_operator is RangeOperator.EQ:
            return version.is_equivalent_to(self.range_version)
        if self.range_operator is RangeOperator.LT:
            return version.is_lower_than(self.range_version)
        if self.range_operator is RangeOperator.LTE:
            return version.is_lower_than_or_equal_to(self.range_version)
        if self.range_operator is RangeOperator.GT:
            return version.is_greater_than(self.range_version)
        return version.is_greater_than_or_equal_to(self.range_version)

    def __str__(self) -> str:
        return f"{self.range_operator.symbol}{self.range_version}"
