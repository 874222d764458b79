"""Immutable nesting context threaded through the flattener's recursion."""

from __future__ import annotations

from dataclasses import dataclass, replace

from unnest.model.nodes import AtRule, Node, SelectorList
from unnest.selectors.algebra import NESTING_TOKEN, combine, split_selector_list


@dataclass(frozen=True)
class AtRuleShell:
    """The name and prelude of an enclosing at-rule, without its body."""

    name: str
    params: str = ""

    @classmethod
    def of(cls, at_rule: AtRule) -> AtRuleShell:
        return cls(name=at_rule.name, params=at_rule.params)

    def build(self, children: tuple[Node, ...]) -> AtRule:
        """Construct a fresh AtRule of this shape around *children*."""
        return AtRule(name=self.name, params=self.params, children=children)


@dataclass(frozen=True)
class NestingContext:
    """Effective selector list plus the chain of enclosing at-rules.

    Every method returns a new context; a context is never modified after
    construction, so sibling branches of the walk cannot observe each
    other's pushes.

    ``selectors`` is None outside any style rule (the tree root).
    ``at_rules`` is ordered outermost first.
    """

    selectors: SelectorList | None = None
    at_rules: tuple[AtRuleShell, ...] = ()

    def nest(self, selectors: SelectorList, nesting_token: str = NESTING_TOKEN) -> NestingContext:
        """Enter a style rule whose own selector list is *selectors*."""
        if self.selectors is None:
            # Root base case: the rule's own list is used as-is.
            resolved: list[str] = []
            for entry in selectors:
                resolved.extend(split_selector_list(entry))
            return replace(self, selectors=tuple(resolved))
        return replace(self, selectors=combine(self.selectors, selectors, nesting_token))

    def push(self, at_rule: AtRule) -> NestingContext:
        """Enter the body of *at_rule*."""
        return replace(self, at_rules=self.at_rules + (AtRuleShell.of(at_rule),))

    def wrap(self, body: tuple[Node, ...]) -> list[Node]:
        """Wrap *body* in a fresh copy of every active at-rule, innermost last."""
        if not self.at_rules:
            return list(body)
        wrapped = self.at_rules[-1].build(body)
        for shell in reversed(self.at_rules[:-1]):
            wrapped = shell.build((wrapped,))
        return [wrapped]

    @property
    def depth(self) -> int:
        return len(self.at_rules)
