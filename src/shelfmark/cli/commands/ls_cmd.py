# ABOUTME: The `shelfmark ls` command for listing catalog objects.
# ABOUTME: Displays a Rich table of every object in the catalog database, ordered by title.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from shelfmark.cli.options import db_option
from shelfmark.db.catalog import CatalogStore
from shelfmark.db.connection import open_catalog

console = Console()


@click.command("ls")
@db_option
def ls(db_path: Path | None) -> None:
    """List all objects in the catalog."""
    conn = open_catalog(db_path)
    try:
        objects = CatalogStore(conn).list_all()
    finally:
        conn.close()

    if not objects:
        console.print("[yellow]No objects in the catalog.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Edition")
    table.add_column("Year", width=6)

    for obj in objects:
        table.add_row(
            obj.id,
            obj.title,
            obj.versions[0] if obj.versions else "",
            obj.year or "?",
        )

    console.print(table)
    console.print(f"\n[dim]{len(objects)} object(s)[/dim]")
