# ABOUTME: Converts between CatalogObject dataclasses and SQLite row dictionaries.
# ABOUTME: Handles JSON serialization for the version and ISBN lists.

import json
from typing import Any

from shelfmark.catalog.types import CatalogObject


def object_to_row(obj: CatalogObject) -> dict[str, Any]:
    """Convert a CatalogObject to a dict suitable for INSERT."""
    return {
        "id": obj.id,
        "source_id": obj.source_id,
        "title": obj.title,
        "abstract": obj.abstract,
        "year": obj.year,
        "versions": json.dumps(list(obj.versions)),
        "isbns": json.dumps(list(obj.isbns)),
    }


def row_to_object(row: Any) -> CatalogObject:
    """Convert a database row (dict-like) back to a CatalogObject."""
    return CatalogObject(
        id=row["id"],
        source_id=row["source_id"],
        title=row["title"],
        abstract=row["abstract"],
        year=row["year"],
        versions=tuple(json.loads(row["versions"])) if row["versions"] else (),
        isbns=tuple(json.loads(row["isbns"])) if row["isbns"] else (),
    )
