"""mhtml CLI entry point: Click group with subcommands."""

import logging

import click

from mhtml import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mhtml")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """mhtml - inspect, validate and render tag selectors."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )


# Import and register subcommands
from mhtml.cli.inspect import inspect  # noqa: E402
from mhtml.cli.render import render  # noqa: E402
from mhtml.cli.validate import validate  # noqa: E402

cli.add_command(inspect)
cli.add_command(validate)
cli.add_command(render)
