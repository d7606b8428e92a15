# SPDX-License-Identifier: MIT
"""Translation of X-Ranges into classic ranges.

See https://github.com/npm/node-semver#x-ranges-12x-1x-12-

Translates:
- ``>1.X.X`` to ``>=2.0.0``
- ``>1.2.X`` to ``>=1.3.0``
- ``<=1.X.X`` to ``<2.0.0``
- ``<=1.2.X`` to ``<1.3.0``
- ``>=1.X.X`` to ``>=1.0.0``
- ``>=1.2.X`` to ``>=1.2.0``
- ``1.X`` to ``>=1.0.0 <2.0.0``
- ``1.2.X`` to ``>=1.2.0 <1.3.0``
- ``=1.2.X`` to ``>=1.2.0 <1.3.0``
"""

from __future__ import annotations

import re
from typing import Optional

from ..tokenizers import XRANGE_PATTERN
from .utils import ALL_RANGE, EQ, GT, GTE, LT, LTE, NO_RANGE, is_x, parse_int_with_x_support

_SPACES = re.compile(r"\s+", re.ASCII)


def _process_token(token: str) -> Optional[str]:
    match = XRANGE_PATTERN.fullmatch(token)
    if match is None:
        return None

    major = parse_int_with_x_support(match.group(2))
    minor = parse_int_with_x_support(match.group(3))
    patch = parse_int_with_x_support(match.group(4))
    compare_sign = match.group(1)
    if compare_sign == EQ and is_x(patch):
        compare_sign = ""

    if is_x(major):
        return NO_RANGE if compare_sign in (GT, LT) else ALL_RANGE

    if compare_sign and is_x(patch):
        if compare_sign == GT:
            if is_x(minor):
                return f"{GTE}{major + 1}.0.0"
            return f"{GTE}{major}.{minor + 1}.0"
        if compare_sign == LTE:
            if is_x(minor):
                return f"{LT}{major + 1}.0.0"
            return f"{LT}{major}.{minor + 1}.0"
        return f"{compare_sign}{major}.{0 if is_x(minor) else minor}.0"

    if is_x(minor):
        return f"{GTE}{major}.0.0 {LT}{major + 1}.0.0"
    if is_x(patch):
        return f"{GTE}{major}.{minor}.0 {LT}{major}.{minor + 1}.0"
    return match.group(0)


def process_x_range(range_: str) -> str:
    """Translate every x-range token of a section.

    Tokens that are not x-ranges are dropped. If no token is an x-range the
    section is returned unchanged.
    """
    ranges = [r for r in map(_process_token, _SPACES.split(range_)) if r is not None]
    return " ".join(ranges) if ranges else range_
