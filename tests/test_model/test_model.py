"""Tests for the syntax tree model and the nesting context."""

import dataclasses

import pytest

from unnest.model import (
    AtRule,
    AtRuleShell,
    Declaration,
    MarkerStatement,
    NestingContext,
    StyleRule,
    has_nesting,
)


# ---------------------------------------------------------------------------
# Node construction
# ---------------------------------------------------------------------------


class TestStyleRule:
    def test_lists_become_tuples(self):
        rule = StyleRule(selectors=[".a", ".b"], children=[Declaration("color", "red")])
        assert rule.selectors == (".a", ".b")
        assert rule.children == (Declaration("color", "red"),)

    def test_empty_selector_list_rejected(self):
        with pytest.raises(ValueError):
            StyleRule(selectors=[])

    def test_blank_selector_rejected(self):
        with pytest.raises(ValueError):
            StyleRule(selectors=[".a", "  "])

    @pytest.mark.parametrize("entry", [",", " , ,"])
    def test_entry_without_any_selector_rejected(self, entry):
        with pytest.raises(ValueError):
            StyleRule(selectors=[".a", entry])

    def test_entry_with_several_alternatives_allowed(self):
        assert StyleRule(selectors=[".a, .b"]).selectors == (".a, .b",)

    def test_selector_text(self):
        assert StyleRule(selectors=[".a", ".b"]).selector_text == ".a, .b"

    def test_frozen(self):
        rule = StyleRule(selectors=[".a"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.selectors = (".b",)  # type: ignore[misc]

    def test_equality_is_structural(self):
        a = StyleRule([".a"], [Declaration("color", "red")])
        b = StyleRule((".a",), (Declaration("color", "red"),))
        assert a == b


class TestOtherNodes:
    def test_at_rule_requires_name(self):
        with pytest.raises(ValueError):
            AtRule(name="")

    def test_at_rule_children_may_be_empty(self):
        assert AtRule(name="media", params="print").children == ()

    def test_declaration_requires_property(self):
        with pytest.raises(ValueError):
            Declaration(property="", value="red")

    def test_declaration_defaults(self):
        assert Declaration("color", "red").important is False

    def test_marker_requires_name(self):
        with pytest.raises(ValueError):
            MarkerStatement(name="")


class TestHasNesting:
    def test_flat_rule(self):
        assert not has_nesting(StyleRule([".a"], [Declaration("color", "red")]))

    def test_rule_with_rule(self):
        assert has_nesting(StyleRule([".a"], [StyleRule([".b"])]))

    def test_rule_with_at_rule(self):
        assert has_nesting(StyleRule([".a"], [AtRule("media", "print")]))

    def test_non_rule(self):
        assert not has_nesting(AtRule("media", "print", [StyleRule([".a"])]))


# ---------------------------------------------------------------------------
# NestingContext
# ---------------------------------------------------------------------------


class TestNestingContext:
    def test_root_nest_uses_selectors_as_is(self):
        ctx = NestingContext().nest((".a", ".b"))
        assert ctx.selectors == (".a", ".b")

    def test_root_nest_keeps_placeholder(self):
        assert NestingContext().nest(("&:hover",)).selectors == ("&:hover",)

    def test_nested_nest_combines(self):
        ctx = NestingContext().nest((".a",)).nest((".b",))
        assert ctx.selectors == (".a .b",)

    def test_push_does_not_mutate_original(self):
        base = NestingContext()
        pushed = base.push(AtRule("media", "print"))
        assert base.at_rules == ()
        assert pushed.at_rules == (AtRuleShell("media", "print"),)
        assert pushed.depth == 1

    def test_sibling_pushes_are_isolated(self):
        base = NestingContext().push(AtRule("layer", "a"))
        left = base.push(AtRule("media", "print"))
        right = base.push(AtRule("supports", "(display: grid)"))
        assert [s.name for s in left.at_rules] == ["layer", "media"]
        assert [s.name for s in right.at_rules] == ["layer", "supports"]

    def test_wrap_without_at_rules(self):
        decl = Declaration("color", "red")
        assert NestingContext().wrap((decl,)) == [decl]

    def test_wrap_outermost_first(self):
        ctx = NestingContext().push(AtRule("layer", "a")).push(AtRule("media", "print"))
        rule = StyleRule([".x"], [Declaration("color", "red")])
        assert ctx.wrap((rule,)) == [
            AtRule("layer", "a", [AtRule("media", "print", [rule])]),
        ]

    def test_wrap_builds_fresh_shells(self):
        ctx = NestingContext().push(AtRule("layer", "a"))
        first = ctx.wrap((StyleRule([".x"]),))[0]
        second = ctx.wrap((StyleRule([".x"]),))[0]
        assert first == second
        assert first is not second
