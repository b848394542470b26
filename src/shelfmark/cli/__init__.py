# ABOUTME: CLI package for Shelfmark, built on Click.
# ABOUTME: Defines the root command group, logging setup and registers subcommands.

import logging

import click

from shelfmark.cli.commands import config_cmd, data_cmd, load_cmd, ls_cmd, show_cmd


@click.group()
@click.version_option(package_name="shelfmark")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Shelfmark - schema.org metadata for library catalog items."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


cli.add_command(load_cmd.load)
cli.add_command(ls_cmd.ls)
cli.add_command(show_cmd.show)
cli.add_command(data_cmd.data)
cli.add_command(config_cmd.config)
