"""Lark Transformer that converts a style sheet parse tree into model nodes."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from unnest.model.nodes import AtRule, Declaration, MarkerStatement, Node, StyleRule
from unnest.parser.errors import ParseError
from unnest.selectors.algebra import split_selector_list

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Quoted strings are matched first so comment-like text inside them survives.
_COMMENT_RE = re.compile(r"('(?:[^'\\]|\\.)*'|\"(?:[^\"\\]|\\.)*\")|/\*.*?\*/", re.DOTALL)
_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)


def _clean(token: Token) -> str:
    """Strip embedded comments and surrounding whitespace from a prelude."""
    return _COMMENT_RE.sub(lambda m: m.group(1) or "", str(token)).strip()


def _build_declaration(token: Token) -> Declaration:
    """Split ``prop: value [!important]`` into a Declaration."""
    text = _clean(token)
    prop, sep, value = text.partition(":")
    if not sep or not prop.strip():
        raise ParseError(
            f"Expected a declaration, got {text!r}",
            line=token.line,
            column=token.column,
        )
    value = value.strip()
    important = False
    match = _IMPORTANT_RE.search(value)
    if match:
        important = True
        value = value[: match.start()]
    return Declaration(property=prop.strip(), value=value, important=important)


def _split_at_rule(items: list[object]) -> tuple[str, str, list[Node]]:
    """Split at-rule items into (name, params, children)."""
    keyword = items[0]
    params = ""
    rest = items[1:]
    if rest and isinstance(rest[0], Token) and rest[0].type == "PRELUDE":
        params = _clean(rest[0])
        rest = rest[1:]
    return str(keyword)[1:], params, [n for n in rest if not isinstance(n, Token)]


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into model nodes."""

    def declaration(self, items: list[Token]) -> Declaration:
        return _build_declaration(items[0])

    def tail_declaration(self, items: list[Token]) -> Declaration:
        return _build_declaration(items[0])

    def style_rule(self, items: list[object]) -> StyleRule:
        prelude = items[0]
        assert isinstance(prelude, Token)
        selectors = split_selector_list(_clean(prelude))
        if not selectors:
            raise ParseError(
                f"Expected a selector, got {str(prelude)!r}",
                line=prelude.line,
                column=prelude.column,
            )
        return StyleRule(selectors=selectors, children=items[1:])  # type: ignore[arg-type]

    def at_block(self, items: list[object]) -> AtRule:
        name, params, children = _split_at_rule(items)
        return AtRule(name=name, params=params, children=children)  # type: ignore[arg-type]

    def at_statement(self, items: list[object]) -> MarkerStatement:
        name, params, _ = _split_at_rule(items)
        return MarkerStatement(name=name, params=params)

    def start(self, items: list[Node]) -> list[Node]:
        return list(items)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
        propagate_positions=True,
    )


def parse_css(source: str) -> list[Node]:
    """Parse style sheet source into a list of top-level nodes."""
    try:
        tree = _parser().parse(source)
    except UnexpectedInput as e:
        logger.debug("parse failed at line %s column %s", e.line, e.column)
        raise ParseError(str(e), line=e.line, column=e.column) from e
    try:
        return CssTransformer().transform(tree)
    except VisitError as e:
        orig = e.orig_exc
        if isinstance(orig, ParseError):
            raise orig from None
        raise ParseError(str(orig)) from orig
