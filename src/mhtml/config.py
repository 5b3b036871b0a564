from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    default_tag: str = "div"  # used when a selector has no tag name
    doctype: str = "<!DOCTYPE html>\n"
    lowercase_tags: bool = True


DEFAULT_CONFIG = BuilderConfig()
