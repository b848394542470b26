# ABOUTME: SQLite-backed catalog store for objects, work collections and library nodes.
# ABOUTME: Implements the repository, library directory and availability protocols.

import sqlite3
from collections.abc import Iterable

from shelfmark.catalog.repository import ObjectNotFoundError
from shelfmark.catalog.types import CatalogObject, CollectionEntity, LibraryNode, WorkCollection
from shelfmark.db.mapping import object_to_row, row_to_object


class DuplicateObjectError(Exception):
    """Raised when attempting to add an object, collection or node id that already exists."""


class CatalogStore:
    """Wraps a sqlite3 connection and provides typed access to the catalog tables."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    # --- Objects ---

    def add_object(self, obj: CatalogObject) -> None:
        """Add a catalog object.

        Raises:
            DuplicateObjectError: If an object with this id already exists.
        """
        row = object_to_row(obj)
        columns = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)

        try:
            self._conn.execute(
                f"INSERT INTO objects ({columns}) VALUES ({placeholders})",
                list(row.values()),
            )
            self._conn.commit()
        except sqlite3.IntegrityError as exc:
            raise DuplicateObjectError(f"Object {obj.id} already exists") from exc

    def get_by_id(self, object_id: str) -> CatalogObject:
        """Retrieve an object by id.

        Raises:
            ObjectNotFoundError: If no object has this id.
        """
        cursor = self._conn.execute("SELECT * FROM objects WHERE id = ?", (object_id,))
        row = cursor.fetchone()
        if row is None:
            raise ObjectNotFoundError(f"Object {object_id} not found")
        return row_to_object(row)

    def list_all(self) -> list[CatalogObject]:
        """Return all objects, ordered by title."""
        cursor = self._conn.execute("SELECT * FROM objects ORDER BY title")
        return [row_to_object(row) for row in cursor.fetchall()]

    # --- Collections ---

    def add_collection(self, collection_id: str, object_ids: Iterable[str]) -> None:
        """Create a work collection from existing objects, keeping the given order.

        Raises:
            DuplicateObjectError: If the collection id already exists.
            ObjectNotFoundError: If any member object does not exist.
        """
        object_ids = list(object_ids)
        for object_id in object_ids:
            self.get_by_id(object_id)

        try:
            self._conn.execute("INSERT INTO collections (id) VALUES (?)", (collection_id,))
            self._conn.executemany(
                "INSERT INTO collection_members (collection_id, object_id, position) "
                "VALUES (?, ?, ?)",
                [(collection_id, object_id, pos) for pos, object_id in enumerate(object_ids)],
            )
            self._conn.commit()
        except sqlite3.IntegrityError as exc:
            self._conn.rollback()
            raise DuplicateObjectError(f"Collection {collection_id} already exists") from exc

    def get_collection(self, object_id: str) -> WorkCollection:
        """Return the work collection that contains the given object.

        When an object belongs to several collections the one with the lowest
        id wins. An object that was never grouped is a work of its own: it
        gets a single-member collection sharing its id.

        Raises:
            ObjectNotFoundError: If no object has this id.
        """
        cursor = self._conn.execute(
            "SELECT collection_id FROM collection_members WHERE object_id = ? "
            "ORDER BY collection_id LIMIT 1",
            (object_id,),
        )
        row = cursor.fetchone()
        if row is None:
            obj = self.get_by_id(object_id)
            return WorkCollection(
                id=obj.id, entities=(CollectionEntity(local_id=obj.source_id, object=obj),)
            )

        collection_id = row[0]
        cursor = self._conn.execute(
            "SELECT o.* FROM objects o "
            "JOIN collection_members cm ON o.id = cm.object_id "
            "WHERE cm.collection_id = ? "
            "ORDER BY cm.position",
            (collection_id,),
        )
        entities = tuple(
            CollectionEntity(local_id=obj.source_id, object=obj)
            for obj in (row_to_object(r) for r in cursor.fetchall())
        )
        return WorkCollection(id=collection_id, entities=entities)

    # --- Library nodes ---

    def add_library_node(self, node_id: int, name: str) -> None:
        """Add a library node. Nodes keep the order in which they were added.

        Raises:
            DuplicateObjectError: If a node with this id already exists.
        """
        try:
            self._conn.execute(
                "INSERT INTO library_nodes (id, name) VALUES (?, ?)", (node_id, name)
            )
            self._conn.commit()
        except sqlite3.IntegrityError as exc:
            raise DuplicateObjectError(f"Library node {node_id} already exists") from exc

    def library_nodes(self) -> dict[int, LibraryNode]:
        """All library nodes keyed by id, in creation order."""
        cursor = self._conn.execute("SELECT id, name FROM library_nodes ORDER BY seq")
        return {row["id"]: LibraryNode(id=row["id"], name=row["name"]) for row in cursor}

    # --- Holdings ---

    def set_reservable(self, local_id: str, reservable: bool) -> None:
        """Record whether the item with this local id can be reserved."""
        self._conn.execute(
            "INSERT INTO holdings (local_id, reservable) VALUES (?, ?) "
            "ON CONFLICT(local_id) DO UPDATE SET reservable = excluded.reservable",
            (local_id, int(reservable)),
        )
        self._conn.commit()

    def is_reservable(self, local_ids: Iterable[str]) -> dict[str, bool]:
        """Batch reservability lookup. Unknown local ids map to False."""
        ids = list(dict.fromkeys(local_ids))
        if not ids:
            return {}
        placeholders = ", ".join("?" for _ in ids)
        cursor = self._conn.execute(
            f"SELECT local_id, reservable FROM holdings WHERE local_id IN ({placeholders})",
            ids,
        )
        known = {row["local_id"]: bool(row["reservable"]) for row in cursor}
        return {local_id: known.get(local_id, False) for local_id in ids}
