"""CLI command: mhtml validate -- check a list of selectors."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from mhtml.selector import SelectorError, parse


@click.command()
@click.argument("selector_file", type=click.File("r", encoding="utf-8"), default="-")
def validate(selector_file: TextIO) -> None:
    """Check one selector per line of SELECTOR_FILE (stdin by default).

    Only the line ending is stripped, so surrounding spaces are part of the
    selector. Empty lines are skipped. Exits with code 1 if any selector
    fails to parse.
    """
    checked = 0
    failures = 0
    for lineno, line in enumerate(selector_file, start=1):
        selector = line.rstrip("\r\n")
        if not selector:
            continue
        checked += 1
        try:
            parse(selector)
        except SelectorError as exc:
            failures += 1
            click.echo(f"line {lineno}: {exc}")

    if not failures:
        click.echo(f"OK: {checked} selector(s) valid")
        sys.exit(0)

    click.echo()
    click.echo(f"Summary: {failures} of {checked} selector(s) invalid")
    sys.exit(1)
