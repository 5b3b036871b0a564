"""CLI command: mhtml inspect -- display the parts of a selector."""

from __future__ import annotations

import sys

import click

from mhtml.selector import SelectorError, parse


@click.command()
@click.argument("selector")
def inspect(selector: str) -> None:
    """Parse a selector and display its tag, id, classes and attributes."""
    try:
        result = parse(selector)
    except SelectorError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Tag:        {result.tag_name or '(default)'}")
    click.echo(f"ID:         {result.id or '(none)'}")
    click.echo(f"Classes:    {' '.join(result.classes) or '(none)'}")
    if result.attributes:
        click.echo("Attributes:")
        for key, value in result.attributes:
            click.echo(f'  {key}="{value}"')
    else:
        click.echo("Attributes: (none)")
    click.echo(f"Canonical:  {result}")
