# ABOUTME: Core catalog data structures read by the schema wrappers.
# ABOUTME: CatalogObject, WorkCollection and LibraryNode are immutable snapshots of store rows.

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CatalogObject:
    """A single library item record (book, audiobook, film, ...).

    `source_id` is the local id the availability provider knows the item by.
    Lists are stored as tuples so the object stays hashable and read-only.
    """

    id: str
    source_id: str
    title: str
    abstract: str | None = None
    year: str | None = None
    versions: tuple[str, ...] = ()
    isbns: tuple[str, ...] = ()


@dataclass(frozen=True)
class CollectionEntity:
    """One member of a work collection: an object plus its local id."""

    local_id: str
    object: CatalogObject


@dataclass(frozen=True)
class WorkCollection:
    """Alternate editions and formats of one work, in display order."""

    id: str
    entities: tuple[CollectionEntity, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class LibraryNode:
    """A physical or organizational library that can act as lender."""

    id: int
    name: str
