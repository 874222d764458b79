"""Shape checks for a forest, and how flattening changes them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from unnest.model.diagnostic import Diagnostic
from unnest.model.nodes import Node
from unnest.selectors.algebra import NESTING_TOKEN
from unnest.transforms.nesting import flatten_nesting
from unnest.validation.rules import ALL_RULES

RuleFunc = Callable[[Sequence[Node]], list[Diagnostic]]


class ValidationError(Exception):
    """Raised when a forest expected to be flat still nests rules.

    ``selectors`` lists the offending rules' selector text in the order
    they were found, each once.
    """

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        self.selectors = list(dict.fromkeys(d.selector for d in diagnostics if d.selector))
        where = "; ".join(self.selectors) or "the top level"
        super().__init__(f"{len(diagnostics)} nesting error(s) under {where}")


def validate(
    nodes: Sequence[Node], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Return every diagnostic the shape rules report for *nodes*."""
    rules = [*ALL_RULES, *(extra_rules or ())]
    return [diag for rule in rules for diag in rule(nodes)]


def validate_or_raise(
    nodes: Sequence[Node], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Like :func:`validate`, but raise :class:`ValidationError` on any ERROR."""
    diagnostics = validate(nodes, extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics


def _key(diag: Diagnostic) -> tuple[str, str | None, tuple[str, ...]]:
    return diag.rule, diag.selector, diag.at_rules


@dataclass(frozen=True)
class FlatteningReport:
    """Diagnostics for a source forest next to those for its flattened form."""

    source: tuple[Diagnostic, ...]
    flattened: tuple[Diagnostic, ...]
    flattened_count: int = 0

    @property
    def is_flat(self) -> bool:
        return not any(d.is_error for d in self.source)

    @property
    def remaining(self) -> list[Diagnostic]:
        """Errors still present after flattening."""
        return [d for d in self.flattened if d.is_error]

    @property
    def resolved(self) -> list[Diagnostic]:
        """Source errors that flattening removes."""
        left = {_key(d) for d in self.remaining}
        return [d for d in self.source if d.is_error and _key(d) not in left]


def report(
    nodes: Sequence[Node],
    extra_rules: list[RuleFunc] | None = None,
    nesting_token: str = NESTING_TOKEN,
) -> FlatteningReport:
    """Validate *nodes* and their flattened form with the same rules."""
    flat = flatten_nesting(nodes, nesting_token=nesting_token)
    return FlatteningReport(
        source=tuple(validate(nodes, extra_rules)),
        flattened=tuple(validate(flat, extra_rules)),
        flattened_count=len(flat),
    )
