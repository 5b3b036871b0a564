"""Write-through HTML renderer.

Output is written to the target piece by piece while the tree is walked;
loops and groups call their callbacks only when reached.
"""

from __future__ import annotations

import html
import io
import logging
from typing import Protocol

from mhtml.elements import (
    Attribute,
    Component,
    Element,
    Fragment,
    GroupNode,
    Loop,
    RawNode,
    Tag,
)

__all__ = ["HTMLRenderer", "Writer", "render", "render_string"]

logger = logging.getLogger(__name__)


class Writer(Protocol):
    """Anything with a text ``write`` method (files, StringIO, streams)."""

    def write(self, s: str) -> object: ...


class HTMLRenderer:
    """Element visitor that writes HTML to a Writer.

    Errors raised by the writer propagate to the caller unchanged.
    """

    def __init__(self, writer: Writer) -> None:
        self._writer = writer

    def render(self, element: Element) -> None:
        if element is None:
            return
        element.accept(self)

    def visit_tag(self, tag: Tag) -> None:
        write = self._writer.write
        write("<")
        write(tag.name)
        for attribute in tag.attributes:
            write(" ")
            write(attribute.key)
            write('="')
            write(html.escape(attribute.value))
            write('"')
        write(">")

        if tag.void:
            return

        for child in tag.children:
            self.render(child)
        write("</")
        write(tag.name)
        write(">")

    def visit_raw(self, node: RawNode) -> None:
        self._writer.write(node.html)

    def visit_fragment(self, fragment: Fragment) -> None:
        for child in fragment.children:
            self.render(child)

    def visit_loop(self, loop: Loop) -> None:
        for i in loop.indices():
            self.render(loop.func(i))

    def visit_group(self, group: GroupNode) -> None:
        for lower, upper in group.runs():
            self.render(group.render(lower, upper))

    def visit_attribute(self, attribute: Attribute) -> None:
        # Attributes only mean something as leading arguments to M().
        return None

    def visit_component(self, component: Component) -> None:
        self.render(component.element())


def render(writer: Writer, element: Element) -> None:
    """Write the HTML of ``element`` to ``writer``."""
    logger.debug("Rendering %s", type(element).__name__)
    HTMLRenderer(writer).render(element)


def render_string(element: Element) -> str:
    """Return the HTML of ``element`` as a string."""
    buf = io.StringIO()
    render(buf, element)
    return buf.getvalue()
