"""Nesting flattener: rewrite nested style rules into flat rules."""

from __future__ import annotations

import logging
from typing import Sequence

from unnest.model.context import NestingContext
from unnest.model.nodes import AtRule, Declaration, MarkerStatement, Node, StyleRule
from unnest.selectors.algebra import NESTING_TOKEN, check_nesting_token

logger = logging.getLogger(__name__)


def _flush(pending: list[Node], context: NestingContext) -> list[Node]:
    """Emit a pending run of body content under *context*."""
    if context.selectors is None:
        body: tuple[Node, ...] = tuple(pending)
    else:
        body = (StyleRule(selectors=context.selectors, children=tuple(pending)),)
    logger.debug(
        "flush %d item(s) under %s (%d at-rule(s))",
        len(pending),
        context.selectors,
        context.depth,
    )
    return context.wrap(body)


def flatten_body(
    children: Sequence[Node],
    context: NestingContext,
    nesting_token: str = NESTING_TOKEN,
) -> list[Node]:
    """Flatten one body sequence under *context*, preserving source order.

    Consecutive declarations and markers are collected into a pending run,
    which is flushed as one flat rule whenever a nested rule or at-rule
    interrupts it and again at the end of the body. Each flushed run gets
    its own copy of the enclosing at-rules, so two rules under one
    ``@media`` come back as two ``@media`` blocks, never merged.
    """
    output: list[Node] = []
    pending: list[Node] = []

    for child in children:
        if isinstance(child, (Declaration, MarkerStatement)):
            pending.append(child)

        elif isinstance(child, StyleRule):
            if pending:
                output.extend(_flush(pending, context))
                pending = []
            inner = context.nest(child.selectors, nesting_token)
            if child.children:
                output.extend(flatten_body(child.children, inner, nesting_token))
            else:
                output.extend(inner.wrap((StyleRule(selectors=inner.selectors),)))

        elif isinstance(child, AtRule):
            if pending:
                output.extend(_flush(pending, context))
                pending = []
            inner = context.push(child)
            if child.children:
                output.extend(flatten_body(child.children, inner, nesting_token))
            else:
                output.extend(inner.wrap(()))

        else:
            raise TypeError(f"Unsupported node type: {type(child).__name__}")

    if pending:
        output.extend(_flush(pending, context))
    return output


def flatten_nesting(nodes: Sequence[Node], nesting_token: str = NESTING_TOKEN) -> list[Node]:
    """Flatten a top-level node forest into a new, non-nested forest.

    The input is never modified. Top-level rules keep their own selector
    lists; nested rules compose theirs with the enclosing rule's.
    """
    check_nesting_token(nesting_token)
    result = flatten_body(nodes, NestingContext(), nesting_token)
    logger.debug("flattened %d top-level node(s) into %d", len(nodes), len(result))
    return result


class NestingFlattenTransform:
    """Flatten rule-in-rule nesting, re-wrapping conditional at-rules."""

    def __init__(self, nesting_token: str = NESTING_TOKEN) -> None:
        self.nesting_token = check_nesting_token(nesting_token)

    def apply(self, nodes: list[Node]) -> list[Node]:
        return flatten_nesting(nodes, nesting_token=self.nesting_token)
