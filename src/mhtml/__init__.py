"""mhtml - HTML element trees in plain Python, declared with selector shorthand."""

__version__ = "0.1.0"

from mhtml.builder import (  # noqa: E402
    F,
    M,
    S,
    T,
    Attr,
    Attrf,
    Document,
    For,
    Group,
    If,
    IfElse,
    Range,
    Raw,
)
from mhtml.config import DEFAULT_CONFIG, BuilderConfig  # noqa: E402
from mhtml.elements import Component, Element  # noqa: E402
from mhtml.render import render, render_string  # noqa: E402
from mhtml.selector import SelectorError  # noqa: E402

__all__ = [
    "__version__",
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
    "Component",
    "Element",
    "BuilderConfig",
    "DEFAULT_CONFIG",
    "render",
    "render_string",
    "SelectorError",
]
