# ABOUTME: The `shelfmark load` command for importing a JSON catalog dump.
# ABOUTME: Adds libraries, objects, holdings and collections to the catalog DB.

from pathlib import Path

import click
from rich.console import Console

from shelfmark.cli.options import db_option
from shelfmark.core.loader import CatalogFileError, load_catalog, read_catalog_file
from shelfmark.db.catalog import CatalogStore
from shelfmark.db.connection import open_catalog

console = Console()


@click.command("load")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@db_option
def load(path: Path, db_path: Path | None) -> None:
    """Load libraries, objects and collections from a JSON file."""
    try:
        data = read_catalog_file(path)
    except CatalogFileError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    conn = open_catalog(db_path)
    try:
        result = load_catalog(data, CatalogStore(conn))
    finally:
        conn.close()

    for entry, message in result.error_details:
        console.print(f"[red]Error:[/red] {entry}: {message}")

    console.print(
        f"[green]{result.added} added[/green], "
        f"{result.skipped} skipped, "
        f"{result.errors} error(s)."
    )
    if result.errors:
        raise SystemExit(1)
