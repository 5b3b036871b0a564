"""Tests for the element constructors."""

import pytest

from mhtml import (
    Attr,
    Attrf,
    BuilderConfig,
    Document,
    F,
    For,
    Group,
    If,
    IfElse,
    M,
    Range,
    Raw,
    S,
    SelectorError,
    T,
)
from mhtml.elements import Attribute, Fragment, GroupNode, Loop, RawNode, Tag


# ---------------------------------------------------------------------------
# M
# ---------------------------------------------------------------------------


class TestM:
    def test_empty_selector_defaults_to_div(self) -> None:
        assert M("") == Tag(name="div")

    def test_tag_name_lowercased(self) -> None:
        assert M("SPAN").name == "span"

    def test_selector_parts_become_attributes(self) -> None:
        tag = M("h1#headline.active.etc[data-id=3]")
        assert tag.name == "h1"
        assert tag.attributes == (
            Attribute("id", "headline"),
            Attribute("class", "active etc"),
            Attribute("data-id", "3"),
        )

    def test_leading_attr_overrides_id(self) -> None:
        tag = M("div#a", Attr("id", "b"))
        assert tag.attributes == (Attribute("id", "b"),)

    def test_leading_attr_appends_class(self) -> None:
        tag = M("div.a", Attr("class", "b c"))
        assert tag.attributes == (Attribute("class", "a b c"),)

    def test_leading_attrs_follow_selector_attrs(self) -> None:
        tag = M("a[href=/]", Attr("rel", "nofollow"), T("home"))
        assert tag.attributes == (Attribute("href", "/"), Attribute("rel", "nofollow"))
        assert tag.children == (RawNode("home"),)

    def test_none_among_leading_attrs_is_skipped(self) -> None:
        tag = M("option", None, Attr("value", "1"), T("One"))
        assert tag.attributes == (Attribute("value", "1"),)
        assert tag.children == (RawNode("One"),)

    def test_attr_after_child_is_a_child(self) -> None:
        tag = M("p", T("x"), Attr("id", "late"))
        assert tag.attributes == ()
        assert tag.children == (RawNode("x"), Attribute("id", "late"))

    def test_class_attr_after_child_does_not_merge(self) -> None:
        tag = M("p.a", T("x"), Attr("class", "b"))
        assert tag.attributes == (Attribute("class", "a"),)

    def test_void_element(self) -> None:
        assert M("br").void is True
        assert M("IMG[src=a.png]").void is True
        assert M("p").void is False

    def test_invalid_selector_raises(self) -> None:
        with pytest.raises(SelectorError):
            M("div.")

    def test_custom_default_tag(self) -> None:
        config = BuilderConfig(default_tag="span")
        assert M(".x", config=config).name == "span"

    def test_case_kept_when_lowercasing_disabled(self) -> None:
        config = BuilderConfig(lowercase_tags=False)
        assert M("svg:linearGradient", config=config).name == "svg:linearGradient"


# ---------------------------------------------------------------------------
# Text and attributes
# ---------------------------------------------------------------------------


class TestText:
    def test_t_escapes(self) -> None:
        assert T("Me & You") == RawNode("Me &amp; You")

    def test_f_formats_then_escapes(self) -> None:
        assert F("Hello, %s", "Tim<") == RawNode("Hello, Tim&lt;")

    def test_f_without_args(self) -> None:
        assert F("100%") == RawNode("100%")

    def test_raw_is_not_escaped(self) -> None:
        assert Raw("<b>") == RawNode("<b>")

    def test_attrf(self) -> None:
        assert Attrf("data-x", "%d", 123) == Attribute("data-x", "123")


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class TestCombinators:
    def test_s_empty_is_none(self) -> None:
        assert S() is None

    def test_s_wraps_elements(self) -> None:
        assert S(T("A"), T("B")) == Fragment((RawNode("A"), RawNode("B")))

    def test_document_prepends_doctype(self) -> None:
        doc = Document(M("html"))
        assert doc.children[0] == RawNode("<!DOCTYPE html>\n")
        assert doc.children[1] == Tag(name="html")

    def test_if(self) -> None:
        assert If(True, T("yes")) == RawNode("yes")
        assert If(False, T("yes")) is None

    def test_if_else(self) -> None:
        assert IfElse(False, T("a"), T("b")) == RawNode("b")

    def test_range_is_a_loop(self) -> None:
        loop = Range(3, lambda i: F("%d", i))
        assert isinstance(loop, Loop)
        assert list(loop.indices()) == [0, 1, 2]

    def test_for_counting_down(self) -> None:
        assert list(For(2, 0, -1, lambda i: None).indices()) == [2, 1, 0]

    def test_for_step_two(self) -> None:
        assert list(For(5, 0, -2, lambda i: None).indices()) == [5, 3, 1]
        assert list(For(0, 5, 2, lambda i: None).indices()) == [0, 2, 4]

    def test_for_zero_step_rejected(self) -> None:
        with pytest.raises(ValueError):
            For(0, 3, 0, lambda i: None)

    def test_group_runs(self) -> None:
        states = ["AZ", "TX", "TX", "CA"]
        node = Group(len(states), lambda i, j: states[i] == states[j], lambda i, j: None)
        assert isinstance(node, GroupNode)
        assert list(node.runs()) == [(0, 1), (1, 3), (3, 4)]

    def test_group_empty(self) -> None:
        node = Group(0, lambda i, j: True, lambda i, j: None)
        assert list(node.runs()) == []
