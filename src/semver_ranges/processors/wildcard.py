# SPDX-License-Identifier: MIT
"""Translation of ``latest``, ``latest.integration``, ``*`` and the empty range."""

from __future__ import annotations

from .utils import ALL_RANGE

LATEST = "latest"
LATEST_INTEGRATION = f"{LATEST}.integration"
ASTERISK = "*"

_ANY_VERSION = frozenset({"", LATEST, LATEST_INTEGRATION, ASTERISK})


def process_greater_than_or_equal_zero(range_: str) -> str:
    """Translate any-version ranges to ``>=0.0.0``.

    Examples:
        >>> process_greater_than_or_equal_zero("latest")
        '>=0.0.0'
        >>> process_greater_than_or_equal_zero("1.2.3")
        '1.2.3'
    """
    return ALL_RANGE if range_ in _ANY_VERSION else range_
