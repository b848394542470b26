# ABOUTME: Assembles the wrapper service bundle from local settings for CLI use.
# ABOUTME: Wires the SQLite store, cover cache, URL resolver and availability provider.

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from shelfmark.availability import AvailabilityProvider, HttpAvailabilityProvider
from shelfmark.covers.cache import FileCoverCache
from shelfmark.covers.providers import CoverProvider, LocalDirectoryCoverProvider
from shelfmark.db.catalog import CatalogStore
from shelfmark.db.settings import SqliteConfigStore
from shelfmark.schema.services import WrapperServices
from shelfmark.urls import SiteUrlResolver


@dataclass
class SiteOptions:
    """Process-level settings, usually filled from CLI options or the environment."""

    base_url: str
    covers_dir: Path
    availability_url: str | None = None
    prefetched_covers: Path | None = None


@contextmanager
def open_services(conn: sqlite3.Connection, options: SiteOptions) -> Iterator[WrapperServices]:
    """Build the services a wrapper needs on top of an open catalog connection.

    Reservability comes from the availability service when availability_url
    is set, otherwise from the holdings table of the catalog. The HTTP client
    behind the availability service is closed when the block exits; the
    connection stays open and belongs to the caller.
    """
    store = CatalogStore(conn)

    http_availability: HttpAvailabilityProvider | None = None
    availability: AvailabilityProvider = store
    if options.availability_url:
        http_availability = HttpAvailabilityProvider(options.availability_url)
        availability = http_availability

    cover_providers: list[CoverProvider] = []
    if options.prefetched_covers is not None:
        cover_providers.append(LocalDirectoryCoverProvider(options.prefetched_covers))

    try:
        yield WrapperServices(
            repository=store,
            libraries=store,
            urls=SiteUrlResolver(options.base_url, files_root=options.covers_dir),
            covers=FileCoverCache(options.covers_dir),
            availability=availability,
            config=SqliteConfigStore(conn),
            cover_providers=tuple(cover_providers),
        )
    finally:
        if http_availability is not None:
            http_availability.close()
