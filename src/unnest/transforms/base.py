"""Base protocol for style sheet transforms."""

from __future__ import annotations

from typing import Protocol

from unnest.model.nodes import Node


class Transform(Protocol):
    """A forest-to-forest transformation step."""

    def apply(self, nodes: list[Node]) -> list[Node]: ...
