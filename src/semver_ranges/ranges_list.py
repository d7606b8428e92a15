# SPDX-License-Identifier: MIT
"""Disjunction of conjunctions of Range items.

The range ``<=2.6.8 || >=3.0.0 <=3.0.1`` is held as::

    [
        (<=2.6.8,),
        (>=3.0.0, <=3.0.1),
    ]

and is satisfied when one of the groups is fully satisfied, so 2.6.8, 3.0.0
and 3.0.1 all pass.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence, Union

from .range import Range
from .semver import Semver

OR_JOINER = " or "
AND_JOINER = " and "
_PARENTHESES = re.compile(r"^\(([^()]+)\)$")


class RangesList:
    """OR-list of AND-groups of ranges."""

    def __init__(self, ranges_list: Optional[Iterable[Sequence[Range]]] = None) -> None:
        self._ranges_list: list[tuple[Range, ...]] = []
        for ranges in ranges_list or ():
            self.add(ranges)

    def add(self, ranges: Sequence[Range]) -> RangesList:
        """Append an AND-group; empty groups are ignored."""
        if ranges:
            self._ranges_list.append(tuple(ranges))
        return self

    def get(self) -> list[tuple[Range, ...]]:
        """Return the AND-groups."""
        return list(self._ranges_list)

    @property
    def is_satisfied_by_any(self) -> bool:
        return all(r.is_satisfied_by_any for ranges in self._ranges_list for r in ranges)

    def is_satisfied_by(self, version: Union[Semver, str]) -> bool:
        """Check whether any AND-group is satisfied by the version.

        Args:
            version: A Semver or a valid semver string

        Raises:
            SemverError: If a version string is not valid semver
        """
        if isinstance(version, str):
            version = Semver.of(version)
        return any(_is_group_satisfied(ranges, version) for ranges in self._ranges_list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangesList):
            return NotImplemented
        return self._ranges_list == other._ranges_list

    def __repr__(self) -> str:
        return f"RangesList({self._ranges_list!r})"

    def __str__(self) -> str:
        representation = OR_JOINER.join(_format_ranges(ranges) for ranges in self._ranges_list)
        return _PARENTHESES.sub(r"\1", representation)


def _format_ranges(ranges: Sequence[Range]) -> str:
    representation = AND_JOINER.join(str(r) for r in ranges)
    return f"({representation})" if len(ranges) > 1 else representation


def _is_group_satisfied(ranges: Sequence[Range], version: Semver) -> bool:
    if not all(r.is_satisfied_by(version) for r in ranges):
        return False
    if not version.pre_release:
        return True

    # A pre-release only matches groups naming a pre-release of the same X.Y.Z
    return any(
        r.range_version.pre_release
        and (r.range_version.major, r.range_version.minor, r.range_version.patch)
        == (version.major, version.minor, version.patch)
        for r in ranges
    )
