"""CLI command: mhtml render -- render a single tag."""

from __future__ import annotations

import sys

import click

from mhtml.builder import M, T
from mhtml.render import render_string
from mhtml.selector import SelectorError


@click.command()
@click.argument("selector")
@click.argument("text", required=False, default=None)
def render(selector: str, text: str | None) -> None:
    """Render the tag described by SELECTOR, with TEXT as escaped content."""
    try:
        element = M(selector, T(text) if text is not None else None)
    except SelectorError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(render_string(element))
