"""Base contract enforcement utilities.

require() is the single enforcement mechanism for postconditions.
require_text() is the single precondition gate shared by every operation.
"""

from textpipe.contracts.failure import (
    ContractViolation,
    InvalidArgumentError,
    NullInputError,
)
from textpipe.contracts.predicates import has_visible_text


def require(condition: bool, message: str) -> None:
    """Enforce an operation postcondition.

    Called after an operation has computed its result, before returning it.
    It is fail-fast: no recovery, no fallback, no silence. Unlike ``assert``
    it is not stripped by ``python -O``.

    Parameters
    ----------
    condition : bool
        The invariant that must be true. If False, ContractViolation is raised.

    message : str
        Error message explaining the contract violation (for debugging).

    Raises
    ------
    ContractViolation
        If condition is False. This indicates a bug in the operation.

    Examples
    --------
    >>> require("  " not in result, "collapse_whitespace: double space in result")
    """
    if not condition:
        raise ContractViolation(message)


def require_text(value, operation: str) -> str:
    """Enforce the common precondition: a non-null, non-blank string.

    Parameters
    ----------
    value : object
        Raw caller input.

    operation : str
        Operation name, used in error messages.

    Returns
    -------
    str
        The input, unchanged.

    Raises
    ------
    NullInputError
        If value is None.
    InvalidArgumentError
        If value is not a str, or is empty or whitespace-only.
    """
    if value is None:
        raise NullInputError(f"{operation}: input must not be None")

    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{operation}: input must be str, got {type(value).__name__}"
        )

    if not has_visible_text(value):
        raise InvalidArgumentError(
            f"{operation}: input must contain at least one non-whitespace character"
        )

    return value
