"""Text pipeline.

- operations: the three contract-checked transforms
- session: input/output state and status flags for front ends
"""

from textpipe.pipeline.operations import (
    LINE_ENDING,
    OPERATIONS,
    collapse_whitespace,
    get_operation,
    remove_empty_lines,
    to_lowercase,
)
from textpipe.pipeline.session import OperationOutcome, OperationSession, indicator

__all__ = [
    "LINE_ENDING",
    "OPERATIONS",
    "collapse_whitespace",
    "get_operation",
    "remove_empty_lines",
    "to_lowercase",
    "OperationOutcome",
    "OperationSession",
    "indicator",
]
