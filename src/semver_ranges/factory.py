# SPDX-License-Identifier: MIT
"""Parsing of range strings into a RangesList.

Example:
    >>> str(create_ranges_list("<=2.6.8 || >=3.0.0 <=3.0.1"))
    '<=2.6.8 or (>=3.0.0 and <=3.0.1)'
"""

from __future__ import annotations

import logging
import re
from typing import Union

from .processors import default_pipeline
from .range import Range, RangeOperator
from .ranges_expression import RangesExpression
from .ranges_list import RangesList
from .tokenizers import COMPARATOR_PATTERN

logger = logging.getLogger(__name__)

_SECTIONS = re.compile(r"\|\|")
# Glues an operator to the version that follows it: ">= 1.0.0" -> ">=1.0.0"
_SPLITTER = re.compile(r"(\s*)([<>]?=?)\s*", re.ASCII)
_SPACES = re.compile(r"\s+", re.ASCII)

_PIPELINE = default_pipeline()


def create_ranges_list(ranges: Union[str, RangesExpression]) -> RangesList:
    """Build a RangesList from a range string or a RangesExpression.

    Sections separated by ``||`` become OR-groups. Within a section, caret,
    tilde, hyphen, Ivy, X-Range and wildcard syntax is rewritten to
    comparators, which are ANDed. Tokens that are not comparators are
    skipped.

    Args:
        ranges: A range string such as ``^1.2.0 || >=2.1.0 <3.0.0``, or an
            expression built with RangesExpression

    Returns:
        The parsed RangesList

    Raises:
        SemverError: If a comparator carries a numeral beyond INT_MAX
    """
    if isinstance(ranges, RangesExpression):
        return ranges.get()

    ranges_list = RangesList()
    for section in _SECTIONS.split(ranges.strip()):
        glued = _SPLITTER.sub(lambda m: m.group(1) + m.group(2), section).strip()
        ranges_list.add(_create_ranges(_PIPELINE.process(glued)))
    return ranges_list


def _create_ranges(section: str) -> list[Range]:
    ranges = []
    for token in _SPACES.split(section):
        if not token:
            continue
        match = COMPARATOR_PATTERN.fullmatch(token)
        if match is None:
            logger.debug("Skipping unrecognized range token %r", token)
            continue
        ranges.append(Range.of(match.group(2), RangeOperator.value_of(match.group(1))))
    return ranges
