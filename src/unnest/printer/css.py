"""Serialize a node forest back into style sheet text."""

from __future__ import annotations

from typing import Sequence

from unnest.model.nodes import AtRule, Declaration, MarkerStatement, Node, StyleRule


def _declaration(node: Declaration) -> str:
    suffix = " !important" if node.important else ""
    return f"{node.property}: {node.value}{suffix};"


def _marker(node: MarkerStatement) -> str:
    if node.params:
        return f"@{node.name} {node.params};"
    return f"@{node.name};"


def _emit(node: Node, depth: int, pad: str, lines: list[str]) -> None:
    prefix = pad * depth
    if isinstance(node, Declaration):
        lines.append(prefix + _declaration(node))
    elif isinstance(node, MarkerStatement):
        lines.append(prefix + _marker(node))
    elif isinstance(node, StyleRule):
        lines.append(f"{prefix}{node.selector_text} {{")
        for child in node.children:
            _emit(child, depth + 1, pad, lines)
        lines.append(prefix + "}")
    elif isinstance(node, AtRule):
        head = f"@{node.name} {node.params}" if node.params else f"@{node.name}"
        lines.append(f"{prefix}{head} {{")
        for child in node.children:
            _emit(child, depth + 1, pad, lines)
        lines.append(prefix + "}")
    else:
        raise TypeError(f"Unsupported node type: {type(node).__name__}")


def to_css(nodes: Sequence[Node], indent: int = 2) -> str:
    """Render *nodes* as style sheet text, one line per statement.

    Nested bodies are indented by *indent* spaces per level. The result
    ends with a newline unless *nodes* is empty.
    """
    lines: list[str] = []
    pad = " " * indent
    for node in nodes:
        _emit(node, 0, pad, lines)
    return "".join(line + "\n" for line in lines)
