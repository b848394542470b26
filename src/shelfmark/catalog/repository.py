# ABOUTME: Read-side protocols for the catalog store consumed by schema wrappers.
# ABOUTME: Any backing store (SQLite, a search service, fakes in tests) implements these.

from typing import Protocol, runtime_checkable

from shelfmark.catalog.types import CatalogObject, LibraryNode, WorkCollection


class ObjectNotFoundError(LookupError):
    """Raised when a catalog object or its collection does not exist."""


@runtime_checkable
class ObjectRepository(Protocol):
    """Protocol for fetching catalog objects and their work collections.

    Both methods raise ObjectNotFoundError instead of returning None, since a
    wrapper is only ever built around an object that is known to exist.
    """

    def get_by_id(self, object_id: str) -> CatalogObject: ...

    def get_collection(self, object_id: str) -> WorkCollection: ...


@runtime_checkable
class LibraryDirectory(Protocol):
    """Protocol for listing library nodes.

    The returned dict must preserve creation order: the first key is the
    first library created.
    """

    def library_nodes(self) -> dict[int, LibraryNode]: ...
