# SPDX-License-Identifier: MIT
"""Translation of tilde ranges (``~1.2.3``, ``~>1.2.3``) into classic ranges.

A tilde range allows patch-level changes when a minor version is given and
minor-level changes otherwise.
"""

from __future__ import annotations

from ..tokenizers import TILDE_PATTERN
from .utils import ALL_RANGE, GTE, LT, is_x, parse_int_with_x_support


def process_tilde(range_: str) -> str:
    """Translate a tilde range; anything else is returned unchanged.

    Examples:
        >>> process_tilde("~1.2.3")
        '>=1.2.3 <1.3.0'
        >>> process_tilde("~>1")
        '>=1.0.0 <2.0.0'
    """
    match = TILDE_PATTERN.fullmatch(range_)
    if match is None:
        return range_

    major = parse_int_with_x_support(match.group(1))
    minor = parse_int_with_x_support(match.group(2))
    patch = parse_int_with_x_support(match.group(3))
    pre_release = match.group(4)

    if is_x(major):
        return ALL_RANGE

    if is_x(minor):
        lower = f"{GTE}{major}.0.0"
        upper = f"{LT}{major + 1}.0.0"
    elif is_x(patch):
        lower = f"{GTE}{major}.{minor}.0"
        upper = f"{LT}{major}.{minor + 1}.0"
    else:
        lower = f"{GTE}{major}.{minor}.{patch}"
        if pre_release:
            lower += f"-{pre_release}"
        upper = f"{LT}{major}.{minor + 1}.0"

    return f"{lower} {upper}"
