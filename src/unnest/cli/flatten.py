"""CLI command: unnest flatten -- rewrite a nested style sheet as flat rules."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from unnest.config import UnnestConfig
from unnest.parser import ParseError, parse_css
from unnest.printer import to_css
from unnest.transforms import flatten_nesting

logger = logging.getLogger(__name__)


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@click.option("-o", "--output", type=click.Path(), default=None, help="Write to this file instead of stdout")
@click.option("--indent", default=2, type=int, show_default=True, help="Spaces per nesting level")
@click.option("--nesting-token", default="&", show_default=True, help="Nesting placeholder character")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log flattening details to stderr")
def flatten(cssfile: str, output: str | None, indent: int, nesting_token: str, verbose: bool) -> None:
    """Flatten nested rules in a style sheet.

    Nested rules are rewritten with combined selectors, and enclosing
    at-rules are rebuilt around every flattened rule.
    """
    try:
        config = UnnestConfig(
            indent=indent,
            nesting_token=nesting_token,
            log_level="DEBUG" if verbose else "WARNING",
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    css_path = Path(cssfile)
    try:
        source = css_path.read_text(encoding="utf-8")
        nodes = parse_css(source)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    flat = flatten_nesting(nodes, nesting_token=config.nesting_token)
    text = to_css(flat, indent=config.indent)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        logger.info("wrote %d rule(s) to %s", len(flat), output)
    else:
        click.echo(text, nl=False)
