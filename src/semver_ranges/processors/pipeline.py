# SPDX-License-Identifier: MIT
"""Ordered chain of range dialect processors."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

logger = logging.getLogger(__name__)

# A processor rewrites the part of a range section it recognizes and returns
# anything else unchanged.
Processor = Callable[[str], str]


class RangeProcessorPipeline:
    """Applies processors left to right, each one to the previous one's output.

    Example:
        >>> pipeline = RangeProcessorPipeline.start_with(process_caret).add_processor(process_tilde)
        >>> pipeline.process("^1.2.3")
        '>=1.2.3 <2.0.0'
    """

    def __init__(self, processors: Iterable[Processor] = ()) -> None:
        self._processors: list[Processor] = list(processors)

    @classmethod
    def start_with(cls, processor: Processor) -> RangeProcessorPipeline:
        return cls([processor])

    def add_processor(self, processor: Processor) -> RangeProcessorPipeline:
        self._processors.append(processor)
        return self

    def process(self, range_: str) -> str:
        processed = range_
        for processor in self._processors:
            processed = processor(processed)
        if processed != range_:
            logger.debug("Rewrote range section %r as %r", range_, processed)
        return processed
