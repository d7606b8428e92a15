# SPDX-License-Identifier: MIT
"""Translation of Ivy version ranges into classic ranges.

See https://ant.apache.org/ivy/history/latest-milestone/settings/version-matchers.html

Translates:
- ``[1.0,2.0]`` to ``>=1.0.0 <=2.0.0``
- ``[1.0,2.0[`` to ``>=1.0.0 <2.0.0``
- ``]1.0,2.0]`` to ``>1.0.0 <=2.0.0``
- ``]1.0,2.0[`` to ``>1.0.0 <2.0.0``
- ``[1.0,)`` to ``>=1.0.0``
- ``]1.0,)`` to ``>1.0.0``
- ``(,2.0]`` to ``<=2.0.0``
- ``(,2.0[`` to ``<2.0.0``
"""

from __future__ import annotations

from typing import Optional

from ..tokenizers import IVY_PATTERN
from .utils import GT, GTE, LT, LTE, is_x, parse_int_with_x_support

LEFT_BRACKET = "["
RIGHT_BRACKET = "]"
LEFT_PARENTHESIS = "("
RIGHT_PARENTHESIS = ")"

_BRACKETS = (LEFT_BRACKET, RIGHT_BRACKET)


def _part(identifier: Optional[str]) -> int:
    value = parse_int_with_x_support(identifier)
    return 0 if is_x(value) else value


def _bound(major: Optional[str], minor: Optional[str], patch: Optional[str]) -> str:
    return f"{_part(major)}.{_part(minor)}.{_part(patch)}"


def process_ivy(range_: str) -> str:
    """Translate an Ivy interval; anything else is returned unchanged."""
    match = IVY_PATTERN.fullmatch(range_)
    if match is None:
        return range_

    open_sign = match.group(1)
    lower = _bound(match.group(2), match.group(3), match.group(4))
    upper = _bound(match.group(5), match.group(6), match.group(7))
    close_sign = match.group(8)

    if open_sign in _BRACKETS:
        from_operator = GTE if open_sign == LEFT_BRACKET else GT
        if close_sign in _BRACKETS:
            to_operator = LTE if close_sign == RIGHT_BRACKET else LT
            return f"{from_operator}{lower} {to_operator}{upper}"
        if close_sign == RIGHT_PARENTHESIS:
            return f"{from_operator}{lower}"
    elif open_sign == LEFT_PARENTHESIS and close_sign in _BRACKETS:
        to_operator = LTE if close_sign == RIGHT_BRACKET else LT
        return f"{to_operator}{upper}"

    return range_
