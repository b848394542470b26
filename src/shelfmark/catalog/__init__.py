# ABOUTME: Catalog package for the item records wrapped by Shelfmark.
# ABOUTME: Exports the catalog dataclasses and the repository protocols.

from shelfmark.catalog.repository import LibraryDirectory, ObjectNotFoundError, ObjectRepository
from shelfmark.catalog.types import CatalogObject, CollectionEntity, LibraryNode, WorkCollection

__all__ = [
    "CatalogObject",
    "CollectionEntity",
    "LibraryDirectory",
    "LibraryNode",
    "ObjectNotFoundError",
    "ObjectRepository",
    "WorkCollection",
]
