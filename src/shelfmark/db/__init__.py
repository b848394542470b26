# ABOUTME: Public API for the Shelfmark catalog database layer.
# ABOUTME: Exports connection management, the catalog store and the settings store.

from shelfmark.db.catalog import CatalogStore, DuplicateObjectError
from shelfmark.db.connection import DEFAULT_DB_PATH, open_catalog
from shelfmark.db.settings import SqliteConfigStore

__all__ = [
    "DEFAULT_DB_PATH",
    "CatalogStore",
    "DuplicateObjectError",
    "SqliteConfigStore",
    "open_catalog",
]
