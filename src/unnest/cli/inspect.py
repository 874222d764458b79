"""CLI command: unnest inspect -- summarize a style sheet's structure."""

from __future__ import annotations

import sys
from collections import Counter
from pathlib import Path
from typing import Sequence

import click

from unnest.model.nodes import AtRule, Node, StyleRule
from unnest.parser import ParseError, parse_css
from unnest.transforms import flatten_nesting


def _count(nodes: Sequence[Node], counts: Counter[str]) -> None:
    for node in nodes:
        counts[type(node).__name__] += 1
        if isinstance(node, (StyleRule, AtRule)):
            _count(node.children, counts)


def _max_rule_depth(nodes: Sequence[Node], depth: int = 0) -> int:
    """Deepest chain of style rules nested inside style rules."""
    deepest = depth
    for node in nodes:
        if isinstance(node, StyleRule):
            deepest = max(deepest, _max_rule_depth(node.children, depth + 1))
        elif isinstance(node, AtRule):
            deepest = max(deepest, _max_rule_depth(node.children, depth))
    return deepest


def _summary(label: str, nodes: Sequence[Node]) -> None:
    counts: Counter[str] = Counter()
    _count(nodes, counts)
    click.echo(f"{label}:")
    click.echo(f"  Top-level nodes: {len(nodes)}")
    for kind in ("StyleRule", "AtRule", "Declaration", "MarkerStatement"):
        click.echo(f"  {kind}: {counts[kind]}")
    click.echo(f"  Rule depth: {_max_rule_depth(nodes)}")


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
def inspect(cssfile: str) -> None:
    """Parse a style sheet and show its structure before and after flattening.

    Shows node counts by kind and the deepest rule-in-rule nesting.
    """
    css_path = Path(cssfile)

    try:
        source = css_path.read_text(encoding="utf-8")
        nodes = parse_css(source)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"File: {css_path.name}")
    _summary("Source", nodes)
    _summary("Flattened", flatten_nesting(nodes))
