"""Element constructors.

    M("h1#headline.active[data-id=3]", T("Hello World"))

renders as ``<h1 id="headline" class="active" data-id="3">Hello World</h1>``.
"""

from __future__ import annotations

import html
from typing import Any, Callable

from mhtml.config import DEFAULT_CONFIG, BuilderConfig
from mhtml.elements import (
    VOID_ELEMENTS,
    Attribute,
    Element,
    Fragment,
    GroupNode,
    Loop,
    RawNode,
    Tag,
)
from mhtml.selector import parse

__all__ = [
    "M",
    "T",
    "F",
    "Raw",
    "Attr",
    "Attrf",
    "S",
    "Document",
    "If",
    "IfElse",
    "Range",
    "For",
    "Group",
]


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    return fmt % args if args else fmt


def _split_leading_attributes(
    elements: tuple[Element, ...],
) -> tuple[list[Attribute], tuple[Element, ...]]:
    """Separate the leading run of Attribute/None values from the children."""
    attributes: list[Attribute] = []
    for i, el in enumerate(elements):
        if isinstance(el, Attribute):
            attributes.append(el)
        elif el is not None:
            return attributes, elements[i:]
    return attributes, ()


def M(selector: str, *elements: Element, config: BuilderConfig = DEFAULT_CONFIG) -> Tag:
    """Build a tag from a selector and its children.

    Selector syntax::

        tagname#id.class-1.class-2[attr-key-1=value][attr-key-2='quoted value']

    Every part is optional; the tag name falls back to ``config.default_tag``.
    Leading Attr() values set extra attributes: an ``id`` attribute replaces
    the selector id, ``class`` values are appended to the selector classes.
    Everything from the first non-attribute element on becomes a child, so an
    Attr("id"/"class") placed after a child is ignored.

    The selector should be a constant. Put dynamic ids, classes and
    attributes in Attr()/Attrf() instead.

    Raises SelectorError if the selector is malformed.
    """
    sel = parse(selector)

    tag_name = sel.tag_name or config.default_tag
    if config.lowercase_tags:
        tag_name = tag_name.lower()

    leading, children = _split_leading_attributes(elements)

    element_id = sel.id or None
    classes = list(sel.classes)
    extra: list[Attribute] = []
    for attribute in leading:
        if attribute.key == "id":
            element_id = attribute.value
        elif attribute.key == "class":
            classes.append(attribute.value)
        else:
            extra.append(attribute)

    attributes: list[Attribute] = []
    if element_id is not None:
        attributes.append(Attribute("id", element_id))
    if classes:
        attributes.append(Attribute("class", " ".join(classes)))
    attributes.extend(Attribute(key, value) for key, value in sel.attributes)
    attributes.extend(extra)

    return Tag(
        name=tag_name,
        attributes=tuple(attributes),
        children=children,
        void=tag_name.lower() in VOID_ELEMENTS,
    )


def T(text: str) -> RawNode:
    """Text, HTML-escaped."""
    return RawNode(html.escape(text))


def F(fmt: str, *args: Any) -> RawNode:
    """Text formatted with ``%`` and then HTML-escaped."""
    return T(_format(fmt, args))


def Raw(markup: str) -> RawNode:
    """Markup rendered without escaping."""
    return RawNode(markup)


def Attr(key: str, value: str) -> Attribute:
    """An attribute; only takes effect as one of the first arguments to M()."""
    return Attribute(key, value)


def Attrf(key: str, fmt: str, *args: Any) -> Attribute:
    return Attr(key, _format(fmt, args))


def S(*elements: Element) -> Fragment | None:
    """Concatenate elements. Returns None when called with no elements."""
    if not elements:
        return None
    return Fragment(tuple(elements))


def Document(*elements: Element, config: BuilderConfig = DEFAULT_CONFIG) -> Fragment:
    """Elements preceded by the HTML5 doctype."""
    return Fragment((Raw(config.doctype), *elements))


def If(cond: bool, if_true: Element) -> Element:
    return IfElse(cond, if_true, None)


def IfElse(cond: bool, if_true: Element, if_false: Element) -> Element:
    return if_true if cond else if_false


def Range(n: int, fn: Callable[[int], Element]) -> Loop:
    """Call ``fn`` for every index from 0 to n-1."""
    return For(0, n, 1, fn)


def For(start: int, end: int, step: int, fn: Callable[[int], Element]) -> Loop:
    """Call ``fn`` for every index of a counted loop.

    With ``step >= 0`` the loop runs while ``i < end``; with a negative step
    it runs while ``i >= end``. Raises ValueError if ``step`` is 0.
    """
    return Loop(start=start, end=end, step=step, func=fn)


def Group(
    n: int,
    group: Callable[[int, int], bool],
    render: Callable[[int, int], Element],
) -> GroupNode:
    """Render contiguous runs of indices that belong together.

    For i in 1..n-1, ``group(lower, i)`` is evaluated, where ``lower`` is the
    first index not yet rendered. If it returns False, ``render(lower, i)``
    is emitted and ``lower`` becomes ``i``. ``render(lower, n)`` is emitted
    at the end.
    """
    return GroupNode(n=n, group=group, render=render)
