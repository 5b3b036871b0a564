from mhtml.selector.errors import (
    InvalidAttributeError,
    InvalidClassError,
    InvalidIDError,
    InvalidSelectorError,
    SelectorError,
    SelectorErrorKind,
)
from mhtml.selector.model import SelectorResult
from mhtml.selector.parser import parse

__all__ = [
    "parse",
    "SelectorResult",
    "SelectorError",
    "SelectorErrorKind",
    "InvalidSelectorError",
    "InvalidIDError",
    "InvalidClassError",
    "InvalidAttributeError",
]
