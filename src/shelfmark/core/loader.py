# ABOUTME: Loads a JSON catalog dump (libraries, objects, collections) into the catalog store.
# ABOUTME: Duplicates are skipped and malformed entries recorded, so a partial dump still loads.

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from shelfmark.catalog.repository import ObjectNotFoundError
from shelfmark.catalog.types import CatalogObject
from shelfmark.db.catalog import CatalogStore, DuplicateObjectError


class CatalogFileError(Exception):
    """Raised when a catalog dump cannot be read or is not a JSON object."""


@dataclass
class LoadResult:
    """Summary of a load operation."""

    added: int = 0
    skipped: int = 0
    errors: int = 0
    error_details: list[tuple[str, str]] = field(default_factory=list)

    def record_error(self, entry: str, message: str) -> None:
        self.errors += 1
        self.error_details.append((entry, message))


def read_catalog_file(path: Path) -> dict[str, Any]:
    """Read and parse a catalog dump.

    Raises:
        CatalogFileError: If the file is unreadable, not JSON, or not an object.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise CatalogFileError(f"Cannot read catalog file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise CatalogFileError(f"Catalog file {path} must contain a JSON object")
    return data


def _to_object(entry: dict[str, Any]) -> CatalogObject:
    """Build a CatalogObject from a dump entry. Raises KeyError/TypeError when malformed."""
    year = entry.get("year")
    return CatalogObject(
        id=str(entry["id"]),
        source_id=str(entry.get("source_id") or entry["id"]),
        title=entry["title"],
        abstract=entry.get("abstract"),
        year=str(year) if year is not None else None,
        versions=tuple(entry.get("versions") or ()),
        isbns=tuple(entry.get("isbns") or ()),
    )


def load_catalog(data: dict[str, Any], store: CatalogStore) -> LoadResult:
    """Load libraries, objects and collections into the store, in that order.

    Dump layout:
        {"libraries": [{"id": 5, "name": "Main"}],
         "objects": [{"id": "...", "source_id": "...", "title": "...",
                      "isbns": [...], "versions": [...], "reservable": true}],
         "collections": [{"id": "...", "objects": ["...", "..."]}]}

    Libraries are added in list order, which becomes their creation order.

    Returns:
        LoadResult with counts of added, skipped and errored entries.
    """
    result = LoadResult()

    for entry in data.get("libraries", []):
        try:
            store.add_library_node(int(entry["id"]), entry["name"])
            result.added += 1
        except DuplicateObjectError:
            result.skipped += 1
        except (KeyError, TypeError, ValueError) as exc:
            result.record_error(f"library {entry!r}", f"malformed entry: {exc}")

    for entry in data.get("objects", []):
        try:
            obj = _to_object(entry)
        except (KeyError, TypeError) as exc:
            result.record_error(f"object {entry!r}", f"malformed entry: {exc}")
            continue

        try:
            store.add_object(obj)
            result.added += 1
        except DuplicateObjectError:
            result.skipped += 1
            continue

        if "reservable" in entry:
            store.set_reservable(obj.source_id, bool(entry["reservable"]))

    for entry in data.get("collections", []):
        try:
            collection_id = str(entry["id"])
            members = [str(object_id) for object_id in entry["objects"]]
        except (KeyError, TypeError) as exc:
            result.record_error(f"collection {entry!r}", f"malformed entry: {exc}")
            continue

        try:
            store.add_collection(collection_id, members)
            result.added += 1
        except DuplicateObjectError:
            result.skipped += 1
        except ObjectNotFoundError as exc:
            result.record_error(f"collection {collection_id}", str(exc))

    return result
