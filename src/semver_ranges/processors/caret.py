# SPDX-License-Identifier: MIT
"""Translation of caret ranges (``^1.2.3``) into classic ranges.

A caret range allows changes that do not modify the left-most non-zero part:

- ``^1.2.3`` to ``>=1.2.3 <2.0.0``
- ``^0.2.3`` to ``>=0.2.3 <0.3.0``
- ``^0.0.3`` to ``>=0.0.3 <0.0.4``
- ``^1.2`` to ``>=1.2.0 <2.0.0``
- ``^0.1`` to ``>=0.1.0 <0.2.0``
- ``^1`` to ``>=1.0.0 <2.0.0``
"""

from __future__ import annotations

from ..tokenizers import CARET_PATTERN
from .utils import ALL_RANGE, GTE, LT, is_x, parse_int_with_x_support


def process_caret(range_: str) -> str:
    """Translate a caret range; anything else is returned unchanged."""
    match = CARET_PATTERN.fullmatch(range_)
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
        upper = f"{LT}0.{minor + 1}.0" if major == 0 else f"{LT}{major + 1}.0.0"
    else:
        lower = f"{GTE}{major}.{minor}.{patch}"
        if pre_release:
            lower += f"-{pre_release}"
        if major != 0:
            upper = f"{LT}{major + 1}.0.0"
        elif minor != 0:
            upper = f"{LT}0.{minor + 1}.0"
        else:
            upper = f"{LT}0.0.{patch + 1}"

    return f"{lower} {upper}"
