# SPDX-License-Identifier: MIT
"""Range dialect processors.

Each processor rewrites one non-standard range syntax into space separated
classic comparators (``>=1.2.3 <2.0.0``) and returns any other input
unchanged. Order matters: later processors expect the rewrites of earlier
ones.
"""

from .caret import process_caret
from .hyphen import process_hyphen
from .ivy import process_ivy
from .pipeline import Processor, RangeProcessorPipeline
from .tilde import process_tilde
from .wildcard import process_greater_than_or_equal_zero
from .xrange import process_x_range

__all__ = [
    "Processor",
    "RangeProcessorPipeline",
    "process_caret",
    "process_greater_than_or_equal_zero",
    "process_hyphen",
    "process_ivy",
    "process_tilde",
    "process_x_range",
    "default_pipeline",
]


def default_pipeline() -> RangeProcessorPipeline:
    """Build the pipeline used to parse range strings."""
    return (
        RangeProcessorPipeline()
        .add_processor(process_greater_than_or_equal_zero)
        .add_processor(process_ivy)
        .add_processor(process_hyphen)
        .add_processor(process_caret)
        .add_processor(process_tilde)
        .add_processor(process_x_range)
    )
