"""Unnest model layer -- public type re-exports."""

from unnest.model.context import AtRuleShell, NestingContext
from unnest.model.diagnostic import Diagnostic, Severity
from unnest.model.nodes import (
    AtRule,
    Declaration,
    MarkerStatement,
    Node,
    SelectorList,
    StyleRule,
    has_nesting,
)

__all__ = [
    # nodes
    "Declaration",
    "MarkerStatement",
    "StyleRule",
    "AtRule",
    "Node",
    "SelectorList",
    "has_nesting",
    # context
    "AtRuleShell",
    "NestingContext",
    # diagnostic
    "Severity",
    "Diagnostic",
]
