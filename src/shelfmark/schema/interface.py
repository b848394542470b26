# ABOUTME: SchemaWrapper protocol listing the getters a structured-data renderer uses.
# ABOUTME: Provider-specific wrappers and test doubles satisfy it structurally.

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class SchemaWrapper(Protocol):
    """Getters for schema.org Book properties of one catalog object."""

    def get_collection_url(self) -> str: ...

    def get_object_url(self) -> str: ...

    def get_image_url(self) -> str | None: ...

    def get_image_dimensions(self) -> tuple[int, int] | None: ...

    def get_work_examples(self) -> Sequence["SchemaWrapper"]: ...

    def get_name(self) -> str: ...

    def get_description(self) -> str | None: ...

    def get_book_edition(self) -> str | None: ...

    def get_date_published(self) -> str | None: ...

    def get_isbn(self) -> str | None: ...

    def has_borrow_action(self) -> bool: ...

    def get_lender_library_id(self) -> str: ...
