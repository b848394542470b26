# ABOUTME: ObjectSchemaWrapper exposes schema.org Book properties of one catalog object.
# ABOUTME: Every getter is a thin projection over the injected collaborator services.

import logging
import re
from collections.abc import Callable
from typing import Any

from shelfmark.catalog.types import CatalogObject
from shelfmark.covers.dimensions import image_dimensions
from shelfmark.covers.providers import any_cover_available
from shelfmark.schema.services import LENDER_LIBRARY_KEY, WrapperServices

logger = logging.getLogger(__name__)

_ISBN_STRIP_RE = re.compile(r"[ -]")
_ISBN13_LENGTH = 13

# Marks a memoized field that has not been computed yet (None is a valid result).
_UNSET: Any = object()


class LenderLibraryNotConfiguredError(LookupError):
    """Raised when no lender library is configured and no library nodes exist."""


# Builds a sibling wrapper: (object, services, has_borrow_action, factory=...) -> wrapper
WrapperFactory = Callable[..., "ObjectSchemaWrapper"]


class ObjectSchemaWrapper:
    """Structured-data view of a single catalog object.

    Instances are built per request and per object and thrown away after
    rendering. `get_image_url()` and `has_borrow_action()` compute their value
    once and return the same value for the lifetime of the instance.

    Work examples are built through `factory`, which defaults to the
    wrapper's own class, so a provider-specific subclass produces siblings of
    the same type. A custom factory is called with the keyword argument
    `factory` and must pass it on.
    """

    def __init__(
        self,
        obj: CatalogObject,
        services: WrapperServices,
        has_borrow_action: bool | None = None,
        *,
        factory: WrapperFactory | None = None,
    ) -> None:
        self._object = obj
        self._services = services
        self._has_borrow_action = has_borrow_action
        self._factory: WrapperFactory = factory or type(self)
        self._image_url: str | None = _UNSET

    @property
    def object(self) -> CatalogObject:
        return self._object

    def get_collection_url(self) -> str:
        """Absolute URL of the work collection containing this object.

        Raises:
            ObjectNotFoundError: If no collection resolves for the object.
        """
        collection = self._services.repository.get_collection(self._object.id)
        return self._services.urls.resolve("collection", collection.id)

    def get_object_url(self) -> str:
        return self._services.urls.resolve("object", self._object.id)

    def get_image_url(self) -> str | None:
        """Absolute URL of the cover image, or None if no cover is known.

        Never triggers a download: only a cover already on disk, or one a
        provider reports as available, yields a URL. The first request for a
        cover still being fetched may therefore come back empty.
        """
        if self._image_url is not _UNSET:
            return self._image_url
        self._image_url = None

        object_id = self._object.id
        covers = self._services.covers

        # Known negative: no need to look on disk or ask providers.
        if covers.has_negative_marker(object_id):
            logger.debug("Negative cover marker for %s", object_id)
            return self._image_url

        image_path = covers.image_path(object_id)
        if image_path.exists() or any_cover_available(
            self._services.cover_providers, self._object
        ):
            self._image_url = self._services.urls.file_url(image_path)
        else:
            logger.debug("No cover for %s", object_id)

        return self._image_url

    def get_image_dimensions(self) -> tuple[int, int] | None:
        """(width, height) of the cached cover file, if present and decodable."""
        image_path = self._services.covers.image_path(self._object.id)
        if not image_path.exists():
            return None
        return image_dimensions(image_path)

    def get_work_examples(self) -> list["ObjectSchemaWrapper"]:
        """One wrapper per entity in this object's work collection.

        Reservability for all examples is looked up in a single batch call and
        handed to each example, so their has_borrow_action() never queries.
        """
        collection = self._services.repository.get_collection(self._object.id)
        entities = collection.entities

        reservability = self._services.availability.is_reservable(
            [entity.local_id for entity in entities]
        )

        return [
            self._factory(
                entity.object,
                self._services,
                reservability.get(entity.local_id, False),
                factory=self._factory,
            )
            for entity in entities
        ]

    def get_name(self) -> str:
        return self._object.title

    def get_description(self) -> str | None:
        return self._object.abstract

    def get_book_edition(self) -> str | None:
        versions = self._object.versions
        return versions[0] if versions else None

    def get_date_published(self) -> str | None:
        return self._object.year

    def get_isbn(self) -> str | None:
        """A single ISBN, preferring ISBN-13.

        Returns the first candidate that is 13 characters long once spaces and
        hyphens are removed, else the first candidate, else None.
        """
        isbns = self._object.isbns
        for isbn in isbns:
            if len(_ISBN_STRIP_RE.sub("", isbn)) == _ISBN13_LENGTH:
                return isbn
        return isbns[0] if isbns else None

    def has_borrow_action(self) -> bool:
        if self._has_borrow_action is None:
            local_id = self._object.source_id
            reservability = self._services.availability.is_reservable([local_id])
            self._has_borrow_action = reservability.get(local_id, False)
        return self._has_borrow_action

    def get_lender_library_id(self) -> str:
        """Absolute URL of the library node presented as lender.

        Uses the configured lender library. Without one, falls back to the
        first library node created, which is right for most sites but not
        guaranteed to be.

        Raises:
            LenderLibraryNotConfiguredError: If nothing is configured and
                there are no library nodes.
        """
        lender_library_id: str | int | None = self._services.config.get(LENDER_LIBRARY_KEY)
        if lender_library_id is None:
            library_nodes = self._services.libraries.library_nodes()
            if not library_nodes:
                raise LenderLibraryNotConfiguredError(
                    "No lender library configured and no library nodes exist"
                )
            lender_library_id = next(iter(library_nodes))
            logger.info("No lender library configured, using library node %s", lender_library_id)

        return self._services.urls.resolve("node", lender_library_id)
