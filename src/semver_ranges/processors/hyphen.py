# SPDX-License-Identifier: MIT
"""Translation of hyphen ranges (``1.2.3 - 2.3.4``) into classic ranges.

Translates:
- ``1.2.3 - 2.3.4`` to ``>=1.2.3 <=2.3.4``
- ``1.2 - 2.3.4`` to ``>=1.2.0 <=2.3.4``
- ``1.2.3 - 2.3`` to ``>=1.2.3 <2.4.0``
- ``1.2.3 - 2`` to ``>=1.2.3 <3.0.0``
"""

from __future__ import annotations

import re

from ..tokenizers import HYPHEN_PATTERN
from .utils import ALL_RANGE, GTE, LT, LTE, is_x, parse_int_with_x_support

_VERSION_PREFIX = re.compile(r"^[v=\s]*", re.ASCII)


def _range_from(match: re.Match) -> str:
    major = parse_int_with_x_support(match.group(2))
    minor = parse_int_with_x_support(match.group(3))
    patch = parse_int_with_x_support(match.group(4))

    if is_x(major):
        return ALL_RANGE
    if is_x(minor):
        return f"{GTE}{major}.0.0"
    if is_x(patch):
        return f"{GTE}{major}.{minor}.0"
    return f"{GTE}{_VERSION_PREFIX.sub('', match.group(1))}"


def _range_to(match: re.Match) -> str:
    major = parse_int_with_x_support(match.group(8))
    minor = parse_int_with_x_support(match.group(9))
    patch = parse_int_with_x_support(match.group(10))

    if is_x(major):
        return ""
    if is_x(minor):
        return f"{LT}{major + 1}.0.0"
    if is_x(patch):
        return f"{LT}{major}.{minor + 1}.0"
    return f"{LTE}{_VERSION_PREFIX.sub('', match.group(7))}"


def process_hyphen(range_: str) -> str:
    """Translate a hyphen range; anything else is returned unchanged."""
    match = HYPHEN_PATTERN.fullmatch(range_)
    if match is None:
        return range_
    return f"{_range_from(match)} {_range_to(match)}".strip()
