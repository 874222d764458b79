"""Selector algebra: compose an ancestor selector list with a nested one.

Two composition modes are supported:

    - Placeholder substitution: every ``&`` in the child selector is
      replaced by the ancestor text, with no combinator inserted
      (``&:hover`` under ``.a`` gives ``.a:hover``).
    - Descendant composition: a child selector without ``&`` is joined to
      the ancestor text with a single space (``.b`` under ``.a`` gives
      ``.a .b``).

A multi-entry ancestor list is folded into one ``:is(...)`` group before
composition, so the result always has one entry per child alternative.
"""

from __future__ import annotations

__all__ = [
    "NESTING_TOKEN",
    "GROUPING_PSEUDO",
    "ancestor_text",
    "check_nesting_token",
    "combine",
    "split_selector_list",
]

NESTING_TOKEN = "&"
GROUPING_PSEUDO = ":is"

_OPENERS = {"(": ")", "[": "]"}
_QUOTES = ('"', "'")


def check_nesting_token(token: str) -> str:
    """Return *token* if it is usable as a nesting placeholder, else raise ValueError."""
    if len(token) != 1:
        raise ValueError(f"nesting_token must be a single character, got {token!r}")
    return token


def split_selector_list(text: str) -> list[str]:
    """Split selector text on top-level commas.

    Commas inside parentheses, brackets, or quoted strings are kept, so
    ``:is(.a, .b) .c, .d`` splits into ``[":is(.a, .b) .c", ".d"]``.
    Empty pieces are dropped.
    """
    parts: list[str] = []
    current: list[str] = []
    closers: list[str] = []
    quote = ""
    escaped = False

    for ch in text:
        current.append(ch)
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif quote:
            if ch == quote:
                quote = ""
        elif ch in _QUOTES:
            quote = ch
        elif ch in _OPENERS:
            closers.append(_OPENERS[ch])
        elif closers and ch == closers[-1]:
            closers.pop()
        elif ch == "," and not closers:
            current.pop()
            parts.append("".join(current))
            current = []
    parts.append("".join(current))

    return [p.strip() for p in parts if p.strip()]


def ancestor_text(ancestor: tuple[str, ...] | list[str]) -> str:
    """Return the text that stands in for *ancestor* inside a child selector.

    A single entry is used raw; several entries are grouped with ``:is()``
    to keep their OR semantics.
    """
    if len(ancestor) == 1:
        return ancestor[0]
    return f"{GROUPING_PSEUDO}({', '.join(ancestor)})"


def combine(
    ancestor: tuple[str, ...] | list[str],
    child: tuple[str, ...] | list[str],
    nesting_token: str = NESTING_TOKEN,
) -> tuple[str, ...]:
    """Compose *child* selectors under *ancestor* selectors.

    Returns one selector per child alternative, in child order. An empty
    ancestor list leaves the child list unchanged.
    """
    alternatives: list[str] = []
    for entry in child:
        alternatives.extend(split_selector_list(entry))

    if not ancestor:
        return tuple(alternatives)

    parent = ancestor_text(ancestor)
    result: list[str] = []
    for selector in alternatives:
        if nesting_token in selector:
            result.append(selector.replace(nesting_token, parent))
        else:
            result.append(f"{parent} {selector}")
    return tuple(result)
