from __future__ import annotations

import dataclasses

import pytest

from mhtml.config import DEFAULT_CONFIG, BuilderConfig


class TestBuilderConfig:
    def test_default_values(self) -> None:
        cfg = BuilderConfig()
        assert cfg.default_tag == "div"
        assert cfg.doctype == "<!DOCTYPE html>\n"
        assert cfg.lowercase_tags is True

    def test_module_default(self) -> None:
        assert DEFAULT_CONFIG == BuilderConfig()

    def test_custom_values(self) -> None:
        cfg = BuilderConfig(default_tag="span", doctype="", lowercase_tags=False)
        assert cfg.default_tag == "span"
        assert cfg.doctype == ""
        assert cfg.lowercase_tags is False

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.default_tag = "p"  # type: ignore[misc]
