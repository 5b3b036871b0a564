"""Selector error types."""

from __future__ import annotations

from enum import Enum


class SelectorErrorKind(Enum):
    """Which part of a selector was malformed."""

    INVALID = "invalid selector"
    INVALID_ID = "invalid ID"
    INVALID_CLASS = "invalid class"
    INVALID_ATTR = "invalid attribute"


class SelectorError(Exception):
    """Raised when a selector string cannot be parsed.

    Attributes:
        kind: The malformed sub-structure.
        selector: The full selector string that was rejected.
    """

    kind: SelectorErrorKind = SelectorErrorKind.INVALID

    def __init__(self, selector: str = "", *, kind: SelectorErrorKind | None = None) -> None:
        if kind is not None:
            self.kind = kind
        self.selector = selector
        message = self.kind.value
        if selector:
            message = f"{message} ({selector})"
        super().__init__(message)


class InvalidSelectorError(SelectorError):
    """Input was left over after every selector segment was read."""

    kind = SelectorErrorKind.INVALID


class InvalidIDError(SelectorError):
    """A '#' was not followed by an id."""

    kind = SelectorErrorKind.INVALID_ID


class InvalidClassError(SelectorError):
    """A '.' was not followed by a class name."""

    kind = SelectorErrorKind.INVALID_CLASS


class InvalidAttributeError(SelectorError):
    """An attribute segment had an empty key or was not closed with ']'."""

    kind = SelectorErrorKind.INVALID_ATTR


_ERRORS_BY_KIND: dict[SelectorErrorKind, type[SelectorError]] = {
    SelectorErrorKind.INVALID: InvalidSelectorError,
    SelectorErrorKind.INVALID_ID: InvalidIDError,
    SelectorErrorKind.INVALID_CLASS: InvalidClassError,
    SelectorErrorKind.INVALID_ATTR: InvalidAttributeError,
}


def error_for_kind(kind: SelectorErrorKind, selector: str) -> SelectorError:
    """Map an error kind to the matching exception instance."""
    return _ERRORS_BY_KIND[kind](selector)
