"""Shared contract predicates.

Pure boolean checks used by both the operations (to enforce their
contracts) and the session layer (to re-derive status flags).
"""

LINE_ENDING = "\r\n"


def has_visible_text(value) -> bool:
    """True if value is a str with at least one non-whitespace character."""
    return isinstance(value, str) and value.strip() != ""


def is_collapsed(text: str, result: str) -> bool:
    """Postcondition of collapse_whitespace.

    - no two adjacent spaces
    - no leading or trailing whitespace
    - the only whitespace left is the plain space
    - never longer than the input
    """
    if "  " in result:
        return False
    if result != result.strip():
        return False
    if any(ch.isspace() and ch != " " for ch in result):
        return False
    return len(result) <= len(text)


def is_lowercased(text: str, result: str) -> bool:
    """Postcondition of to_lowercase.

    Lowercasing the result again changes nothing, the result equals the
    lowercase mapping of the input, and no character that has a one-to-one
    lowercase form is still uppercase.
    """
    if result.lower() != result:
        return False
    if result != text.lower():
        return False
    return not any(
        ch != ch.lower() and len(ch.lower()) == 1
        for ch in result
    )


def has_no_empty_lines(text: str, result: str) -> bool:
    """Postcondition of remove_empty_lines.

    Lengths are compared on line content only: joining with the two
    character LINE_ENDING may make LF-only input longer.
    """
    if LINE_ENDING * 2 in result:
        return False
    if result.startswith(LINE_ENDING) or result.endswith(LINE_ENDING):
        return False

    lines = result.split(LINE_ENDING)
    for line in lines:
        if not line or "\r" in line or "\n" in line:
            return False

    return sum(len(line) for line in lines) <= len(text)


# Operation name -> (input, result) -> bool
POSTCONDITIONS = {
    "collapse_whitespace": is_collapsed,
    "to_lowercase": is_lowercased,
    "remove_empty_lines": has_no_empty_lines,
}
