# ABOUTME: Shared Click options for Shelfmark CLI commands.
# ABOUTME: Provides reusable decorators for --db and the site/service settings.

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from shelfmark.db.connection import DEFAULT_DB_PATH

DEFAULT_BASE_URL = "http://localhost"
DEFAULT_COVERS_DIR = Path.home() / ".shelfmark" / "covers"

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    envvar="SHELFMARK_DB",
    help=f"Path to catalog database (default: {DEFAULT_DB_PATH})",
)


def site_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add --base-url, --covers-dir, --availability-url and --prefetched-covers."""
    func = click.option(
        "--prefetched-covers",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Directory of pre-fetched covers named by ISBN or source id.",
    )(func)
    func = click.option(
        "--availability-url",
        default=None,
        envvar="SHELFMARK_AVAILABILITY_URL",
        help="Reservability service endpoint (default: holdings in the catalog DB).",
    )(func)
    func = click.option(
        "--covers-dir",
        type=click.Path(file_okay=False, path_type=Path),
        default=DEFAULT_COVERS_DIR,
        envvar="SHELFMARK_COVERS_DIR",
        show_default=True,
        help="Cover cache directory.",
    )(func)
    func = click.option(
        "--base-url",
        default=DEFAULT_BASE_URL,
        envvar="SHELFMARK_BASE_URL",
        show_default=True,
        help="Absolute site URL used to build canonical links.",
    )(func)
    return func
