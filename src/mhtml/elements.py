"""Element tree model: the node variants an HTML document is built from.

Every variant implements ``accept(visitor)`` and is handled by exactly one
``visit_*`` method of an ElementVisitor. ``None`` stands for "no element"
anywhere an element is accepted.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Protocol, Union

__all__ = [
    "Attribute",
    "Component",
    "Element",
    "ElementVisitor",
    "Fragment",
    "GroupNode",
    "Loop",
    "RawNode",
    "Tag",
    "VOID_ELEMENTS",
]

VOID_ELEMENTS: frozenset[str] = frozenset({
    "area",
    "base",
    "br",
    "col",
    "command",
    "embed",
    "hr",
    "img",
    "input",
    "keygen",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
})


class ElementVisitor(Protocol):
    """Receives one call per element variant."""

    def visit_tag(self, tag: Tag) -> Any: ...

    def visit_raw(self, node: RawNode) -> Any: ...

    def visit_fragment(self, fragment: Fragment) -> Any: ...

    def visit_loop(self, loop: Loop) -> Any: ...

    def visit_group(self, group: GroupNode) -> Any: ...

    def visit_attribute(self, attribute: Attribute) -> Any: ...

    def visit_component(self, component: Component) -> Any: ...


@dataclass(frozen=True)
class Attribute:
    """A ``key="value"`` pair passed as a leading child of M()."""

    key: str
    value: str

    def accept(self, visitor: ElementVisitor) -> Any:
        return visitor.visit_attribute(self)


@dataclass(frozen=True)
class Tag:
    """An HTML tag with its attributes and children."""

    name: str
    attributes: tuple[Attribute, ...] = ()
    children: tuple[Element, ...] = ()
    void: bool = False

    def accept(self, visitor: ElementVisitor) -> Any:
        return visitor.visit_tag(self)


@dataclass(frozen=True)
class RawNode:
    """Markup written out exactly as given."""

    html: str

    def accept(self, visitor: ElementVisitor) -> Any:
        return visitor.visit_raw(self)


@dataclass(frozen=True)
class Fragment:
    """Elements rendered one after another with nothing around them."""

    children: tuple[Element, ...] = ()

    def accept(self, visitor: ElementVisitor) -> Any:
        return visitor.visit_fragment(self)


@dataclass(frozen=True)
class Loop:
    """Calls ``func`` for each index of a counted loop at render time.

    A non-negative step counts up while ``i < end``; a negative step counts
    down while ``i >= end``.
    """

    start: int
    end: int
    step: int
    func: Callable[[int], Element]

    def __post_init__(self) -> None:
        if self.step == 0:
            raise ValueError("Loop step must be non-zero")

    def indices(self) -> range:
        if self.step > 0:
            return range(self.start, self.end, self.step)
        return range(self.start, self.end - 1, self.step)

    def accept(self, visitor: ElementVisitor) -> Any:
        return visitor.visit_loop(self)


@dataclass(frozen=True)
class GroupNode:
    """Renders runs of contiguous indices that ``group`` says belong together.

    ``group(lower, i)`` compares the first index of the current run with the
    next index. When it returns False the run ``[lower, i)`` is passed to
    ``render`` and a new run starts at ``i``. The final run always ends at
    ``n``.
    """

    n: int
    group: Callable[[int, int], bool]
    render: Callable[[int, int], Element]

    def runs(self) -> Iterator[tuple[int, int]]:
        if self.n <= 0:
            return
        lower = 0
        for i in range(1, self.n):
            if not self.group(lower, i):
                yield lower, i
                lower = i
        yield lower, self.n

    def accept(self, visitor: ElementVisitor) -> Any:
        return visitor.visit_group(self)


class Component(ABC):
    """Base class for reusable elements built from other elements.

    Subclasses implement ``element()``, which returns the tree to render.
    """

    @abstractmethod
    def element(self) -> Element: ...

    def accept(self, visitor: ElementVisitor) -> Any:
        return visitor.visit_component(self)


Element = Optional[Union[Tag, RawNode, Fragment, Loop, GroupNode, Attribute, Component]]
