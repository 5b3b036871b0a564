"""Single-pass parser for tag selectors.

Syntax:
    tagname#id.class-1.class-2[key-1=value][key-2='quoted \\' value'][flag]

Every segment is optional. Segments must appear in the order above: at most
one id, any number of classes, then any number of attributes.
"""

from __future__ import annotations

import logging

from mhtml.selector.errors import SelectorError, SelectorErrorKind, error_for_kind
from mhtml.selector.model import SelectorResult

__all__ = ["parse"]

logger = logging.getLogger(__name__)

# Characters that end a tag name, id or class name.
_IDENT_STOPS = frozenset("#.[")
# Characters that end an attribute key.
_KEY_STOPS = frozenset("=]")
_VALUE_STOPS = frozenset("]")


class _Scanner:
    """Forward-only cursor over a selector string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def consume(self, ch: str) -> bool:
        """Advance past ``ch`` if it is the next character."""
        if not self.at_end and self.text[self.pos] == ch:
            self.pos += 1
            return True
        return False

    def read_until(self, stops: frozenset[str]) -> str:
        """Read a run of characters up to (not including) any of ``stops``."""
        start = self.pos
        text = self.text
        while self.pos < len(text) and text[self.pos] not in stops:
            self.pos += 1
        return text[start:self.pos]

    def read_quoted(self) -> str:
        """Read a single-quoted value; the opening quote is already consumed.

        ``\\'`` yields a literal quote. Any other character is copied as-is.
        Hitting end of input before the closing quote returns what was read.
        """
        chars: list[str] = []
        text = self.text
        while self.pos < len(text):
            ch = text[self.pos]
            self.pos += 1
            if ch == "\\" and self.consume("'"):
                chars.append("'")
            elif ch == "'":
                break
            else:
                chars.append(ch)
        return "".join(chars)


def _fail(kind: SelectorErrorKind, selector: str) -> SelectorError:
    logger.debug("Rejected selector %r: %s", selector, kind.value)
    return error_for_kind(kind, selector)


def _parse_attribute(scanner: _Scanner, selector: str) -> tuple[str, str]:
    """Parse one ``key]`` / ``key=value]`` segment after its opening ``[``."""
    key = scanner.read_until(_KEY_STOPS)
    if not key or scanner.at_end:
        raise _fail(SelectorErrorKind.INVALID_ATTR, selector)

    if scanner.consume("]"):
        return key, ""

    # The key scan stopped on '='.
    scanner.consume("=")
    if scanner.consume("'"):
        value = scanner.read_quoted()
    else:
        value = scanner.read_until(_VALUE_STOPS)

    if not scanner.consume("]"):
        raise _fail(SelectorErrorKind.INVALID_ATTR, selector)
    return key, value


def parse(selector: str) -> SelectorResult:
    """Parse a selector string into a SelectorResult.

    Raises a SelectorError subclass naming the malformed segment if the
    selector does not match the grammar or has trailing input.
    """
    if not selector:
        return SelectorResult()

    scanner = _Scanner(selector)
    tag_name = scanner.read_until(_IDENT_STOPS)

    element_id = ""
    if scanner.consume("#"):
        element_id = scanner.read_until(_IDENT_STOPS)
        if not element_id:
            raise _fail(SelectorErrorKind.INVALID_ID, selector)

    classes: list[str] = []
    while scanner.consume("."):
        class_name = scanner.read_until(_IDENT_STOPS)
        if not class_name:
            raise _fail(SelectorErrorKind.INVALID_CLASS, selector)
        classes.append(class_name)

    attributes: list[tuple[str, str]] = []
    while scanner.consume("["):
        attributes.append(_parse_attribute(scanner, selector))

    if not scanner.at_end:
        raise _fail(SelectorErrorKind.INVALID, selector)

    return SelectorResult(
        tag_name=tag_name,
        id=element_id,
        classes=tuple(classes),
        attributes=tuple(attributes),
    )
