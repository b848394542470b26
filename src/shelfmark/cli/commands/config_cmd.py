# ABOUTME: The `shelfmark config` command group for site configuration variables.
# ABOUTME: Provides get, set, unset and ls subcommands over the settings table.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from shelfmark.cli.options import db_option
from shelfmark.db.connection import open_catalog
from shelfmark.db.settings import SqliteConfigStore

console = Console()


@click.group("config")
def config() -> None:
    """Manage site configuration (e.g. lender_library)."""


@config.command("get")
@click.argument("key")
@db_option
def config_get(key: str, db_path: Path | None) -> None:
    """Print the value of a setting."""
    conn = open_catalog(db_path)
    value = SqliteConfigStore(conn).get(key)
    conn.close()

    if value is None:
        console.print(f"[yellow]{key} is not set.[/yellow]")
        raise SystemExit(1)
    click.echo(value)


@config.command("set")
@click.argument("key")
@click.argument("value")
@db_option
def config_set(key: str, value: str, db_path: Path | None) -> None:
    """Set a configuration value."""
    conn = open_catalog(db_path)
    SqliteConfigStore(conn).set(key, value)
    conn.close()
    console.print(f"Set [bold]{key}[/bold] = [cyan]{value}[/cyan].")


@config.command("unset")
@click.argument("key")
@db_option
def config_unset(key: str, db_path: Path | None) -> None:
    """Remove a configuration value."""
    conn = open_catalog(db_path)
    SqliteConfigStore(conn).delete(key)
    conn.close()
    console.print(f"Unset [bold]{key}[/bold].")


@config.command("ls")
@db_option
def config_ls(db_path: Path | None) -> None:
    """List all configuration values."""
    conn = open_catalog(db_path)
    settings = SqliteConfigStore(conn).all()
    conn.close()

    if not settings:
        console.print("[yellow]No settings.[/yellow]")
        return

    table = Table()
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in settings.items():
        table.add_row(key, value)
    console.print(table)
