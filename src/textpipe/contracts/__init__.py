"""Operation contracts: fail-fast enforcement of pre- and postconditions.

Preconditions reject bad caller input before any work is done.
Postconditions verify an operation kept its promise before its result is
returned. Postconditions always run; they are not ``assert`` statements.

Key principle:
- Pydantic validates config correctness
- Preconditions validate caller input
- Postconditions validate operation correctness
"""

from textpipe.contracts.failure import (
    ContractViolation,
    InvalidArgumentError,
    NullInputError,
    PreconditionError,
)
from textpipe.contracts.base import require, require_text
from textpipe.contracts.predicates import (
    LINE_ENDING,
    POSTCONDITIONS,
    has_no_empty_lines,
    has_visible_text,
    is_collapsed,
    is_lowercased,
)
from textpipe.contracts.invariants import OPERATION_CONTRACTS

__all__ = [
    "ContractViolation",
    "InvalidArgumentError",
    "NullInputError",
    "PreconditionError",
    "require",
    "require_text",
    "LINE_ENDING",
    "POSTCONDITIONS",
    "has_no_empty_lines",
    "has_visible_text",
    "is_collapsed",
    "is_lowercased",
    "OPERATION_CONTRACTS",
]
