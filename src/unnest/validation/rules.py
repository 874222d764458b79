"""Shape rules for flattened style sheets.

Each rule is a function taking a node forest and returning a list of
Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from unnest.model.diagnostic import Diagnostic, Severity
from unnest.model.nodes import AtRule, Declaration, Node, StyleRule, has_nesting


def _walk(
    nodes: Sequence[Node], at_rules: tuple[str, ...] = ()
) -> Iterator[tuple[Node, tuple[str, ...], bool]]:
    """Yield (node, enclosing at-rule preludes, is_top_level) depth-first.

    Only AtRule bodies are descended into; StyleRule bodies are inspected
    by the rules themselves.
    """
    for node in nodes:
        yield node, at_rules, not at_rules
        if isinstance(node, AtRule):
            label = f"@{node.name} {node.params}".rstrip()
            yield from _walk(node.children, at_rules + (label,))


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_nested_rule(nodes: Sequence[Node]) -> list[Diagnostic]:
    """A flat style rule may only contain declarations and markers."""
    diagnostics: list[Diagnostic] = []
    for node, at_rules, _ in _walk(nodes):
        if not isinstance(node, StyleRule) or not has_nesting(node):
            continue
        for child in node.children:
            if isinstance(child, (StyleRule, AtRule)):
                kind = "rule" if isinstance(child, StyleRule) else f"@{child.name}"
                diagnostics.append(
                    Diagnostic(
                        rule="nested_rule",
                        severity=Severity.ERROR,
                        message=f"Style rule contains a nested {kind}.",
                        selector=node.selector_text,
                        at_rules=at_rules,
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# Advisory rules (WARNING / INFO severity)
# ---------------------------------------------------------------------------


def check_top_level_declaration(nodes: Sequence[Node]) -> list[Diagnostic]:
    """Declarations at the root of the sheet have no rule to apply to."""
    diagnostics: list[Diagnostic] = []
    for node, at_rules, top_level in _walk(nodes):
        if isinstance(node, Declaration) and top_level:
            diagnostics.append(
                Diagnostic(
                    rule="top_level_declaration",
                    severity=Severity.WARNING,
                    message=f"Declaration '{node.property}' is outside any rule.",
                    at_rules=at_rules,
                )
            )
    return diagnostics


def check_empty_rule(nodes: Sequence[Node]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for node, at_rules, _ in _walk(nodes):
        if isinstance(node, StyleRule) and not node.children:
            diagnostics.append(
                Diagnostic(
                    rule="empty_rule",
                    severity=Severity.INFO,
                    message="Style rule has an empty body.",
                    selector=node.selector_text,
                    at_rules=at_rules,
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_nested_rule,
    check_top_level_declaration,
    check_empty_rule,
]
