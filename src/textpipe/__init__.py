"""`textpipe` - contract-checked text normalization.

Subpackages:
- contracts: Error kinds, pre/postcondition enforcement, shared predicates
- pipeline: The three operations and operation sessions
- schemas: Pydantic configuration
- cli: Command-line front end
"""

from textpipe.contracts import (
    ContractViolation,
    InvalidArgumentError,
    NullInputError,
    PreconditionError,
)
from textpipe.pipeline import collapse_whitespace, remove_empty_lines, to_lowercase

__version__ = "0.1.0"

__all__ = [
    "ContractViolation",
    "InvalidArgumentError",
    "NullInputError",
    "PreconditionError",
    "collapse_whitespace",
    "remove_empty_lines",
    "to_lowercase",
]
