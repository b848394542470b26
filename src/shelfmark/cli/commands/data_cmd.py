# ABOUTME: The `shelfmark data` command for printing schema.org Book data as JSON.
# ABOUTME: Wraps one catalog object and dumps build_book_data() to stdout.

import json
from pathlib import Path

import click
from rich.console import Console

from shelfmark.availability import AvailabilityFetchError
from shelfmark.catalog.repository import ObjectNotFoundError
from shelfmark.cli.options import db_option, site_options
from shelfmark.core.site import SiteOptions, open_services
from shelfmark.db.connection import open_catalog
from shelfmark.schema.book_data import build_book_data
from shelfmark.schema.wrapper import LenderLibraryNotConfiguredError, ObjectSchemaWrapper

console = Console(stderr=True)


@click.command("data")
@click.argument("object_id")
@db_option
@site_options
def data(
    object_id: str,
    db_path: Path | None,
    base_url: str,
    covers_dir: Path,
    availability_url: str | None,
    prefetched_covers: Path | None,
) -> None:
    """Print schema.org Book data for a catalog object as JSON."""
    options = SiteOptions(
        base_url=base_url,
        covers_dir=covers_dir,
        availability_url=availability_url,
        prefetched_covers=prefetched_covers,
    )
    conn = open_catalog(db_path)
    try:
        with open_services(conn, options) as services:
            wrapper = ObjectSchemaWrapper(services.repository.get_by_id(object_id), services)
            book = build_book_data(wrapper)
    except (
        ObjectNotFoundError,
        LenderLibraryNotConfiguredError,
        AvailabilityFetchError,
    ) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc
    finally:
        conn.close()

    click.echo(json.dumps(book, indent=2, ensure_ascii=False))
