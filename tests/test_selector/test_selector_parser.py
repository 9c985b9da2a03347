"""Tests for the selector string parser."""

import pytest

from objtasks.config import BuilderConfig
from objtasks.selector import (
    CombinatorError,
    DuplicateViolation,
    OrderViolation,
    SelectorBuilder,
    SelectorParseError,
    css_selector_builder as builder,
    parse_selector,
)
from objtasks.selector.model import Fragment, FragmentKind


# ---------------------------------------------------------------------------
# Compound selectors
# ---------------------------------------------------------------------------


class TestCompound:
    def test_element(self):
        sel = parse_selector("div")
        assert sel.fragments == (Fragment(FragmentKind.ELEMENT, "div"),)

    def test_universal(self):
        assert parse_selector("*").stringify() == "*"

    def test_all_kinds(self):
        sel = parse_selector("input#name.field[required]:invalid::placeholder")
        assert [f.kind for f in sel.fragments] == [
            FragmentKind.ELEMENT,
            FragmentKind.ID,
            FragmentKind.CLASS,
            FragmentKind.ATTRIBUTE,
            FragmentKind.PSEUDO_CLASS,
            FragmentKind.PSEUDO_ELEMENT,
        ]
        assert [f.value for f in sel.fragments] == [
            "input",
            "name",
            "field",
            "required",
            "invalid",
            "placeholder",
        ]

    def test_attribute_expression(self):
        sel = parse_selector('a[href$=".png"]:focus')
        assert sel.fragments[1] == Fragment(FragmentKind.ATTRIBUTE, 'href$=".png"')
        assert sel.stringify() == 'a[href$=".png"]:focus'

    def test_pseudo_class_argument(self):
        sel = parse_selector("tr:nth-of-type(even)")
        assert sel.fragments[1] == Fragment(FragmentKind.PSEUDO_CLASS, "nth-of-type(even)")

    def test_surrounding_whitespace_ignored(self):
        assert parse_selector("  #main.container  ").stringify() == "#main.container"


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class TestCombinators:
    def test_sibling(self):
        assert parse_selector("div#main + table#data").stringify() == "div#main + table#data"

    def test_tight_combinator(self):
        assert parse_selector("ul>li").stringify() == "ul > li"

    def test_descendant(self):
        assert parse_selector("nav a").stringify() == "nav   a"

    def test_matches_builder_output(self):
        built = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert parse_selector(built.stringify()).stringify() == built.stringify()

    def test_combined_result_has_no_fragments(self):
        sel = parse_selector("a > b")
        assert sel.fragments == ()
        assert sel.rank is FragmentKind.INITIAL

    def test_uses_given_builder(self):
        strict = SelectorBuilder(BuilderConfig(combinators=(">",)))
        assert parse_selector("a > b", builder=strict).stringify() == "a > b"
        with pytest.raises(CombinatorError):
            parse_selector("a + b", builder=strict)


# ---------------------------------------------------------------------------
# Builder output parses back unchanged
# ---------------------------------------------------------------------------


def _built_selectors():
    compounds = [
        builder.element("div"),
        builder.id("main"),
        builder.class_("a").class_("b"),
        builder.element("a").attr('href$=".png"').pseudo_class("focus"),
        builder.element("a").attr('title="x]y"'),
        builder.attr("data-x='[1]'").attr("lang|=en"),
        builder.element("li").pseudo_class("nth-child(2n+1)").pseudo_element("marker"),
        builder.element("input").id("q").class_("f").attr("required").pseudo_class("invalid"),
        builder.pseudo_element("selection"),
        builder.element("*").class_("wide"),
    ]
    selectors = list(compounds)
    for left in compounds:
        for combinator in (" ", "+", "~", ">"):
            selectors.append(builder.combine(left, combinator, compounds[3]))
    selectors.append(
        builder.combine(
            compounds[0], ">", builder.combine(compounds[1], "~", compounds[6])
        )
    )
    return selectors


class TestBuilderOutputParses:
    def test_quoted_bracket_in_attribute(self):
        sel = parse_selector('a[title="x]y"]')
        assert sel.fragments[1] == Fragment(FragmentKind.ATTRIBUTE, 'title="x]y"')

    def test_single_quoted_bracket_in_attribute(self):
        sel = parse_selector("[data-x='[1]']")
        assert sel.fragments[0] == Fragment(FragmentKind.ATTRIBUTE, "data-x='[1]'")

    def test_built_selectors_parse_back(self):
        for built in _built_selectors():
            assert parse_selector(built.stringify()).stringify() == built.stringify()

    def test_fragments_after_combine_are_not_parseable(self):
        # The last compound of "ul > li.x#y" lists the id after the class.
        built = builder.combine(builder.element("ul"), ">", builder.element("li"))
        text = built.class_("x").id("y").stringify()
        assert text == "ul > li.x#y"
        with pytest.raises(OrderViolation):
            parse_selector(text)


# ---------------------------------------------------------------------------
# Rule violations
# ---------------------------------------------------------------------------


class TestViolations:
    def test_duplicate_id(self):
        with pytest.raises(DuplicateViolation):
            parse_selector("#a#b")

    def test_class_after_attr(self):
        with pytest.raises(OrderViolation):
            parse_selector("a[href].link")

    def test_rules_apply_per_compound(self):
        assert parse_selector("#a > #b").stringify() == "#a > #b"

    def test_violation_in_later_compound(self):
        with pytest.raises(OrderViolation):
            parse_selector("div > ::before:hover")


# ---------------------------------------------------------------------------
# Syntax errors
# ---------------------------------------------------------------------------


class TestSyntaxErrors:
    def test_empty(self):
        with pytest.raises(SelectorParseError):
            parse_selector("")

    def test_whitespace_only(self):
        with pytest.raises(SelectorParseError):
            parse_selector("   ")

    def test_dangling_combinator(self):
        with pytest.raises(SelectorParseError):
            parse_selector("div >")

    def test_unclosed_attribute(self):
        with pytest.raises(SelectorParseError) as info:
            parse_selector("a[href")
        assert info.value.column is not None
