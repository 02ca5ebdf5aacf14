"""Contract-checked text operations.

Each operation follows the same shape:

1. **Precondition**: ``require_text`` rejects ``None`` (NullInputError) and
   empty or whitespace-only input (InvalidArgumentError).
2. **Compute**: a single pure string transform.
3. **Postcondition**: the shared predicate for the operation is enforced
   with ``require``. A failure raises ContractViolation.
4. **Return**.

The operations are independent and never chained. The precondition is
applied to the raw input, so ``"\\n\\n\\n"`` is rejected even by
remove_empty_lines.
"""

import logging
import re
from types import MappingProxyType
from typing import Callable

from textpipe.contracts import (
    LINE_ENDING,
    has_no_empty_lines,
    is_collapsed,
    is_lowercased,
    require,
    require_text,
)

__all__ = [
    "LINE_ENDING",
    "OPERATIONS",
    "collapse_whitespace",
    "get_operation",
    "remove_empty_lines",
    "to_lowercase",
]

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")
# CRLF must be tried before the bare forms
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def collapse_whitespace(text: str) -> str:
    """Replace every run of whitespace with one space and trim the ends.

    Parameters
    ----------
    text : str
        Non-blank input.

    Returns
    -------
    str
        Single-spaced, trimmed text.

    Raises
    ------
    NullInputError
        If text is None.
    InvalidArgumentError
        If text is empty or whitespace-only.
    ContractViolation
        If the result breaks the postcondition (operation bug).

    Examples
    --------
    >>> collapse_whitespace("  hello    world  ")
    'hello world'
    >>> collapse_whitespace("hello\\t\\tworld\\n\\n")
    'hello world'
    """
    require_text(text, "collapse_whitespace")

    result = _WHITESPACE_RUN.sub(" ", text).strip()

    require(
        is_collapsed(text, result),
        f"collapse_whitespace contract violated: result {result!r} is not single-spaced and trimmed"
    )
    logger.debug("collapse_whitespace: %d -> %d chars", len(text), len(result))
    return result


def to_lowercase(text: str) -> str:
    """Map every character to lowercase; non-letters pass through.

    Uses ``str.lower()``, which is locale-independent.

    Examples
    --------
    >>> to_lowercase("HELLO! @#$%")
    'hello! @#$%'
    """
    require_text(text, "to_lowercase")

    result = text.lower()

    require(
        is_lowercased(text, result),
        f"to_lowercase contract violated: result {result!r} still has uppercase characters"
    )
    logger.debug("to_lowercase: %d chars", len(result))
    return result


def remove_empty_lines(text: str) -> str:
    """Drop zero-length lines and rejoin the rest with CRLF.

    Splits on ``\\r\\n``, ``\\r`` and ``\\n``. Only zero-length segments are
    discarded; a line of spaces is kept as-is. Output always uses
    LINE_ENDING regardless of the host platform.

    Examples
    --------
    >>> remove_empty_lines("line1\\r\\n\\r\\nline2\\n\\nline3")
    'line1\\r\\nline2\\r\\nline3'
    """
    require_text(text, "remove_empty_lines")

    lines = [line for line in _LINE_BREAK.split(text) if line]
    result = LINE_ENDING.join(lines)

    require(
        has_no_empty_lines(text, result),
        "remove_empty_lines contract violated: result still contains an empty line"
    )
    logger.debug("remove_empty_lines: kept %d lines", len(lines))
    return result


OPERATIONS: "MappingProxyType[str, Callable[[str], str]]" = MappingProxyType({
    "collapse_whitespace": collapse_whitespace,
    "to_lowercase": to_lowercase,
    "remove_empty_lines": remove_empty_lines,
})


def get_operation(name: str) -> Callable[[str], str]:
    """Look up an operation by name.

    Raises
    ------
    KeyError
        If name is not a known operation. The message lists known names.
    """
    try:
        return OPERATIONS[name]
    except KeyError:
        raise KeyError(
            f"Unknown operation: {name!r}. Known operations: {', '.join(OPERATIONS)}"
        ) from None
