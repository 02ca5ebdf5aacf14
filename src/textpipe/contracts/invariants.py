"""Formal operation contracts.

This file documents what each operation REQUIRES and GUARANTEES. The
session layer renders these entries for the user; the enforcement itself
lives in predicates.py and base.py.
"""

_NON_BLANK = "Input is not None and contains at least one non-whitespace character"

OPERATION_CONTRACTS = {
    "collapse_whitespace": {
        "title": "Collapse whitespace",
        "precondition": _NON_BLANK,
        "postconditions": [
            "Every run of whitespace is replaced by a single space",
            "No leading or trailing whitespace",
            "Result is not longer than the input",
        ],
        "valid_example": ("  hello    world  ", "hello world"),
        "invalid_example": ("", "precondition failed: InvalidArgumentError"),
    },

    "to_lowercase": {
        "title": "Lowercase",
        "precondition": _NON_BLANK,
        "postconditions": [
            "Every character is mapped to its lowercase form",
            "Lowercasing the result again changes nothing",
        ],
        "valid_example": ("Hello WORLD", "hello world"),
        "invalid_example": ("", "precondition failed: InvalidArgumentError"),
    },

    "remove_empty_lines": {
        "title": "Remove empty lines",
        "precondition": _NON_BLANK,
        "postconditions": [
            "Zero-length lines are removed (whitespace-only lines are kept)",
            "Order of the remaining lines is preserved",
            "Lines are joined with CRLF",
            "Line content is not longer than the input",
        ],
        "valid_example": ("line1\n\nline2", "line1\r\nline2"),
        "invalid_example": ("\n\n\n", "precondition failed: InvalidArgumentError"),
    },
}
