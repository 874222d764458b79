"""Syntax tree model: StyleRule, AtRule, Declaration, and MarkerStatement."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from unnest.selectors.algebra import split_selector_list

# Ordered selector alternatives for one rule; position matters, no dedup.
SelectorList = tuple[str, ...]


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair inside a rule body."""

    property: str
    value: str
    important: bool = False

    def __post_init__(self) -> None:
        if not self.property:
            raise ValueError("Declaration property must be a non-empty string")


@dataclass(frozen=True)
class MarkerStatement:
    """A body-less at-statement such as ``@slot;``.

    Markers carry no selector or declaration semantics and are passed
    through every transform unchanged.
    """

    name: str
    params: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("MarkerStatement name must be a non-empty string")


@dataclass(frozen=True)
class StyleRule:
    """A selector list paired with an ordered body of child nodes."""

    selectors: SelectorList
    children: tuple[Node, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "selectors", tuple(self.selectors))
        object.__setattr__(self, "children", tuple(self.children))
        if not self.selectors:
            raise ValueError("StyleRule must have at least one selector")
        if any(not split_selector_list(s) for s in self.selectors):
            raise ValueError(f"StyleRule selectors must name a selector: {self.selectors!r}")

    @property
    def selector_text(self) -> str:
        """Return the selector list joined the way it is printed."""
        return ", ".join(self.selectors)


@dataclass(frozen=True)
class AtRule:
    """A block at-rule (``@media``, ``@layer``, ``@supports`` ...).

    ``name`` is stored without the leading ``@``; ``params`` is the raw
    prelude text, kept verbatim.
    """

    name: str
    params: str = ""
    children: tuple[Node, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))
        if not self.name:
            raise ValueError("AtRule name must be a non-empty string")


Node = Union[StyleRule, AtRule, Declaration, MarkerStatement]


def has_nesting(node: Node) -> bool:
    """Return True if *node* is a StyleRule that contains rules or at-rules."""
    if isinstance(node, StyleRule):
        return any(isinstance(c, (StyleRule, AtRule)) for c in node.children)
    return False
