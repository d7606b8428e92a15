# SPDX-License-Identifier: MIT
"""Exceptions raised by semver-ranges."""

from __future__ import annotations


class SemverError(ValueError):
    """Raised when a version string or version component is not valid semver."""

    pass


class RangeOperatorError(SemverError):
    """Raised when a range operator symbol is not one of =, <, <=, >, >=."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Range operator for '{symbol}' not found")
