"""CLI command: unnest check -- report nesting and what flattening fixes."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from unnest.model.diagnostic import Diagnostic
from unnest.parser import ParseError, parse_css
from unnest.validation import report


def _echo_all(diagnostics: list[Diagnostic]) -> None:
    for diag in diagnostics:
        click.echo(f"  {diag}")


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
def check(cssfile: str) -> None:
    """Check a style sheet for nested rules.

    Nested rules are listed along with whether flattening resolves them,
    followed by advisories about the flattened output. Exits with code 1
    when the file is not flat.
    """
    css_path = Path(cssfile)
    try:
        nodes = parse_css(css_path.read_text(encoding="utf-8"))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    result = report(nodes)
    advisories = [d for d in result.flattened if not d.is_error]

    if result.is_flat:
        click.echo(f"OK: {css_path.name} is flat")
    else:
        nested = [d for d in result.source if d.is_error]
        click.echo(f"{css_path.name}: {len(nested)} rule(s) with nested content")
        _echo_all(nested)
        click.echo(
            f"Flattening resolves {len(result.resolved)} of {len(nested)}"
            f" into {result.flattened_count} top-level node(s)"
        )
        _echo_all(result.remaining)

    if advisories:
        click.echo(f"Advisories after flattening: {len(advisories)}")
        _echo_all(advisories)

    sys.exit(0 if result.is_flat else 1)
