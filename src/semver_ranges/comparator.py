# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0 section 11.

Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from .semver import Semver

LESS_THAN = -1
EQUAL = 0
GREATER_THAN = 1

_ALL_DIGITS = re.compile(r"[0-9]+", re.ASCII)
_CONTAINS_DIGIT = re.compile(r"[0-9]", re.ASCII)
# Leading non-digit run, first digit run, remainder
_ALPHANUMERIC_RUNS = re.compile(r"([^0-9]*)([0-9]+)(.*)", re.ASCII | re.DOTALL)


def _sign(left, right) -> int:
    return (left > right) - (left < right)


def compare(semver: Semver, other: Semver) -> int:
    """Compare two versions by SemVer precedence.

    Args:
        semver: Left-hand version
        other: Right-hand version

    Returns:
        -1 if semver < other
        0 if both have the same precedence
        1 if semver > other

    Examples:
        >>> compare(Semver.of("1.0.0-alpha"), Semver.of("1.0.0"))
        -1
        >>> compare(Semver.of("1.0.0+build.1"), Semver.of("1.0.0"))
        0
    """
    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(semver, attr), getattr(other, attr))
        if result != EQUAL:
            return result

    return _compare_pre_release(semver.pre_release, other.pre_release)


def _compare_pre_release(pre_release: Sequence[str], other: Sequence[str]) -> int:
    """Compare two pre-release identifier sequences.

    A version without pre-release has higher precedence than one with a
    pre-release (1.0.0 > 1.0.0-alpha). A shorter sequence that is a prefix of
    a longer one has lower precedence (1.0.0-alpha < 1.0.0-alpha.1).
    """
    if pre_release and not other:
        return LESS_THAN
    if not pre_release:
        return GREATER_THAN if other else EQUAL

    for identifier, other_identifier in zip_longest(pre_release, other):
        if identifier is None:
            return LESS_THAN
        if other_identifier is None:
            return GREATER_THAN
        if identifier != other_identifier:
            return compare_identifiers(identifier, other_identifier)

    return EQUAL


def compare_identifiers(identifier: str, other: str) -> int:
    """Compare two pre-release identifiers.

    Numeric identifiers compare numerically. When both identifiers contain
    digits and share the same leading non-digit run (``rc2`` vs ``rc10``), the
    digit runs compare numerically. Anything else compares lexically.

    Examples:
        >>> compare_identifiers("11", "2")
        1
        >>> compare_identifiers("rc10", "rc9")
        1
        >>> compare_identifiers("beta", "alpha")
        1
    """
    if _ALL_DIGITS.fullmatch(identifier) and _ALL_DIGITS.fullmatch(other):
        return _sign(int(identifier), int(other))

    if _CONTAINS_DIGIT.search(identifier) and _CONTAINS_DIGIT.search(other):
        result = _compare_alphanumeric(identifier, other)
        if result is not None:
            return result

    return _sign(identifier, other)


def _compare_alphanumeric(identifier: str, other: str) -> Optional[int]:
    """Compare mixed identifiers run by run.

    Returns None when the leading non-digit runs differ, in which case the
    caller falls back to a lexical comparison.
    """
    runs = _ALPHANUMERIC_RUNS.fullmatch(identifier)
    other_runs = _ALPHANUMERIC_RUNS.fullmatch(other)
    if runs is None or other_runs is None:
        return None

    prefix, digits, rest = runs.groups()
    other_prefix, other_digits, other_rest = other_runs.groups()
    if prefix != other_prefix:
        return None

    result = _sign(int(digits), int(other_digits))
    if result != EQUAL:
        return result

    # Same value: fewer leading zeros sorts first (rc1 < rc01)
    result = _sign(len(digits), len(other_digits))
    if result != EQUAL:
        return result

    if rest == other_rest:
        return EQUAL
    return compare_identifiers(rest, other_rest)
