# ABOUTME: The `shelfmark show` command for viewing structured-data fields of an object.
# ABOUTME: Prints every wrapper getter as a table, then the object's work examples.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from shelfmark.availability import AvailabilityFetchError
from shelfmark.catalog.repository import ObjectNotFoundError
from shelfmark.cli.options import db_option, site_options
from shelfmark.core.site import SiteOptions, open_services
from shelfmark.db.connection import open_catalog
from shelfmark.schema.wrapper import LenderLibraryNotConfiguredError, ObjectSchemaWrapper

console = Console()


def _or_dim(value: object, placeholder: str = "none") -> str:
    return str(value) if value not in (None, "") else f"[dim]{placeholder}[/dim]"


def _print_object(wrapper: ObjectSchemaWrapper) -> None:
    table = Table(title=wrapper.object.id, show_header=False, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Name", wrapper.get_name())
    table.add_row("Description", _or_dim(wrapper.get_description()))
    table.add_row("Object URL", wrapper.get_object_url())
    table.add_row("Collection URL", wrapper.get_collection_url())
    table.add_row("Image URL", _or_dim(wrapper.get_image_url()))
    dimensions = wrapper.get_image_dimensions()
    table.add_row("Image size", f"{dimensions[0]}x{dimensions[1]}" if dimensions else _or_dim(None))
    table.add_row("Edition", _or_dim(wrapper.get_book_edition()))
    table.add_row("Published", _or_dim(wrapper.get_date_published(), "unknown"))
    table.add_row("ISBN", _or_dim(wrapper.get_isbn()))
    table.add_row("Borrowable", "yes" if wrapper.has_borrow_action() else "no")
    table.add_row("Lender", wrapper.get_lender_library_id())

    console.print(table)


def _print_work_examples(wrapper: ObjectSchemaWrapper) -> None:
    examples = wrapper.get_work_examples()

    table = Table(title="Work examples")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Edition")
    table.add_column("ISBN")
    table.add_column("Borrowable")

    for example in examples:
        table.add_row(
            example.object.id,
            example.get_name(),
            _or_dim(example.get_book_edition()),
            _or_dim(example.get_isbn()),
            "yes" if example.has_borrow_action() else "no",
        )

    console.print(table)
    console.print(f"\n[dim]{len(examples)} work example(s)[/dim]")


@click.command("show")
@click.argument("object_id")
@db_option
@site_options
def show(
    object_id: str,
    db_path: Path | None,
    base_url: str,
    covers_dir: Path,
    availability_url: str | None,
    prefetched_covers: Path | None,
) -> None:
    """Show the structured-data fields of a catalog object."""
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
            _print_object(wrapper)
            _print_work_examples(wrapper)
    except (
        ObjectNotFoundError,
        LenderLibraryNotConfiguredError,
        AvailabilityFetchError,
    ) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc
    finally:
        conn.close()
