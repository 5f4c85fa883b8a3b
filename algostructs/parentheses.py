"""Checking bracket matching with a strict nesting order."""

from __future__ import annotations

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())

# Opening symbols that may not appear directly inside the key.
_FORBIDDEN_INSIDE = {
    "(": frozenset("[{"),
    "[": frozenset("{"),
    "{": frozenset("("),
}


def parentheses_match(text: str) -> bool:
    """Return True if every bracket in ``text`` is closed and nested in order.

    Braces may hold braces or brackets, brackets may hold brackets or
    parentheses, and parentheses may hold only parentheses.  Other
    characters are ignored.
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENERS:
            if stack and char in _FORBIDDEN_INSIDE[stack[-1]]:
                return False
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack[-1] != _PAIRS[char]:
                return False
            stack.pop()
    return not stack