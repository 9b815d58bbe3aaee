"""Tests for selector serialization."""

import pytest

from cssbuilder.builder import SelectorBuilder
from cssbuilder.model import (
    Combinator,
    CompositeSelector,
    PartKind,
    SelectorPart,
    SimpleSelector,
)
from cssbuilder.render import RenderOptions, stringify


def _tag(name: str) -> SimpleSelector:
    return SimpleSelector().append(SelectorPart(PartKind.ELEMENT, name))


# ---------------------------------------------------------------------------
# Simple selectors
# ---------------------------------------------------------------------------


class TestSimple:
    def test_parts_concatenate_in_insertion_order(self):
        parts = [
            SelectorPart(PartKind.ELEMENT, "input"),
            SelectorPart(PartKind.CLASS, "field"),
            SelectorPart(PartKind.ATTRIBUTE, 'type="text"'),
            SelectorPart(PartKind.PSEUDO_CLASS, "invalid"),
            SelectorPart(PartKind.PSEUDO_CLASS, "focus"),
            SelectorPart(PartKind.PSEUDO_ELEMENT, "placeholder"),
        ]
        selector = SimpleSelector()
        for part in parts:
            selector = selector.append(part)
        assert stringify(selector) == "".join(str(p) for p in parts)
        assert stringify(selector) == 'input.field[type="text"]:invalid:focus::placeholder'

    def test_empty(self):
        assert stringify(SimpleSelector()) == ""

    def test_chain_needs_builder_stringify(self):
        chain = SelectorBuilder().element("a").class_("nav")
        with pytest.raises(TypeError):
            stringify(chain)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Composite selectors
# ---------------------------------------------------------------------------


class TestComposite:
    @pytest.mark.parametrize(
        "combinator, expected",
        [
            (Combinator.DESCENDANT, "a   b"),
            (Combinator.CHILD, "a > b"),
            (Combinator.ADJACENT_SIBLING, "a + b"),
            (Combinator.GENERAL_SIBLING, "a ~ b"),
        ],
    )
    def test_each_combinator(self, combinator, expected):
        assert stringify(CompositeSelector(_tag("a"), combinator, _tag("b"))) == expected

    def test_left_nested(self):
        inner = CompositeSelector(_tag("a"), Combinator.CHILD, _tag("b"))
        outer = CompositeSelector(inner, Combinator.ADJACENT_SIBLING, _tag("c"))
        assert stringify(outer) == "a > b + c"

    def test_right_nested(self):
        inner = CompositeSelector(_tag("b"), Combinator.CHILD, _tag("c"))
        outer = CompositeSelector(_tag("a"), Combinator.GENERAL_SIBLING, inner)
        assert stringify(outer) == "a ~ b > c"

    def test_both_sides_nested(self):
        left = CompositeSelector(_tag("a"), Combinator.CHILD, _tag("b"))
        right = CompositeSelector(_tag("c"), Combinator.GENERAL_SIBLING, _tag("d"))
        tree = CompositeSelector(left, Combinator.ADJACENT_SIBLING, right)
        assert stringify(tree) == "a > b + c ~ d"

    def test_deep_tree_beyond_recursion_limit(self):
        tree = _tag("e0")
        for i in range(1, 5000):
            tree = CompositeSelector(tree, Combinator.CHILD, _tag(f"e{i}"))
        text = stringify(tree)
        assert text.startswith("e0 > e1 > e2")
        assert text.endswith("e4998 > e4999")
        assert text.count(" > ") == 4999

    def test_deep_right_nesting(self):
        tree = _tag("e4999")
        for i in range(4998, -1, -1):
            tree = CompositeSelector(_tag(f"e{i}"), Combinator.ADJACENT_SIBLING, tree)
        assert stringify(tree).split(" + ") == [f"e{i}" for i in range(5000)]

    def test_idempotent(self):
        tree = CompositeSelector(_tag("a"), Combinator.DESCENDANT, _tag("b"))
        assert stringify(tree) == stringify(tree)
        assert tree == CompositeSelector(_tag("a"), Combinator.DESCENDANT, _tag("b"))

    @pytest.mark.parametrize("value", ["div", ">", Combinator.CHILD, None])
    def test_rejects_non_selector(self, value):
        with pytest.raises(TypeError):
            stringify(value)  # type: ignore[arg-type]

    def test_combinator_given_as_symbol(self):
        tree = CompositeSelector(_tag("a"), ">", _tag("b"))  # type: ignore[arg-type]
        assert stringify(tree) == "a > b"


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class TestRenderOptions:
    def test_collapse_descendant(self):
        tree = CompositeSelector(_tag("tr"), Combinator.DESCENDANT, _tag("td"))
        options = RenderOptions(collapse_descendant=True)
        assert stringify(tree, options) == "tr td"

    def test_collapse_leaves_other_combinators(self):
        tree = CompositeSelector(_tag("ul"), Combinator.CHILD, _tag("li"))
        options = RenderOptions(collapse_descendant=True)
        assert stringify(tree, options) == "ul > li"
