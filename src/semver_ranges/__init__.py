# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and range matching.

This package parses versions following the SemVer 2.0.0 specification,
orders them by SemVer precedence and checks them against range expressions,
including npm style caret, tilde, hyphen and X-ranges and Ivy intervals.

Example:
    >>> from semver_ranges import Semver, coerce, create_ranges_list
    >>>
    >>> version = Semver.of("1.2.3-alpha.1+build.456")
    >>> version.pre_release
    ('alpha', '1')
    >>>
    >>> version.satisfies("1.0.0 - 1.2.3-beta")
    True
    >>>
    >>> str(create_ranges_list("^14.14.20 || ^16.0.0"))
    '(>=14.14.20 and <15.0.0) or (>=16.0.0 and <17.0.0)'
    >>>
    >>> coerce("version 1.2")
    Semver(major=1, minor=2, patch=0, pre_release=(), build=())
"""

import logging

__version__ = "0.1.0"

from .exceptions import (
    RangeOperatorError,
    SemverError,
)
from .semver import (
    Semver,
    VersionDiff,
    coerce,
    is_valid,
    parse,
)
from .comparator import compare
from .range import (
    Range,
    RangeOperator,
)
from .ranges_list import RangesList
from .ranges_expression import (
    RangesExpression,
    equal,
    greater,
    greater_or_equal,
    less,
    less_or_equal,
)
from .factory import create_ranges_list

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "SemverError",
    "RangeOperatorError",
    # Versions
    "Semver",
    "VersionDiff",
    "parse",
    "coerce",
    "is_valid",
    "compare",
    # Ranges
    "Range",
    "RangeOperator",
    "RangesList",
    "RangesExpression",
    "equal",
    "greater",
    "greater_or_equal",
    "less",
    "less_or_equal",
    "create_ranges_list",
]
