"""Selector model: the parsed form of a tag selector."""

from __future__ import annotations

from dataclasses import dataclass


def _needs_quoting(value: str) -> bool:
    return "'" in value or "]" in value


@dataclass(frozen=True)
class SelectorResult:
    """A parsed ``tag#id.class[key=value]`` selector.

    Attributes:
        tag_name: Tag name as written; empty when omitted.
        id: Element id; empty when the selector has no ``#`` segment.
        classes: Class names in order of appearance, duplicates kept.
        attributes: ``(key, value)`` pairs in order of appearance. A
            presence attribute such as ``[selected]`` has an empty value.
    """

    tag_name: str = ""
    id: str = ""
    classes: tuple[str, ...] = ()
    attributes: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        parts = [self.tag_name]
        if self.id:
            parts.append(f"#{self.id}")
        parts.extend(f".{name}" for name in self.classes)
        for key, value in self.attributes:
            if not value:
                parts.append(f"[{key}]")
            elif _needs_quoting(value):
                escaped = value.replace("'", "\\'")
                parts.append(f"[{key}='{escaped}']")
            else:
                parts.append(f"[{key}={value}]")
        return "".join(parts)
