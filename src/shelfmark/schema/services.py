# ABOUTME: The collaborator bundle injected into every schema wrapper.
# ABOUTME: Groups repository, URL, cover, availability and configuration services.

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from shelfmark.availability import AvailabilityProvider
from shelfmark.catalog.repository import LibraryDirectory, ObjectRepository
from shelfmark.covers.cache import CoverCache
from shelfmark.covers.providers import CoverProvider
from shelfmark.urls import UrlResolver

# Config key holding the node id of the library presented as lender.
LENDER_LIBRARY_KEY = "lender_library"


@runtime_checkable
class ConfigStore(Protocol):
    """Protocol for reading site configuration variables."""

    def get(self, key: str) -> str | None: ...


@dataclass(frozen=True)
class WrapperServices:
    """Everything a wrapper needs besides the object it wraps.

    Shared by a wrapper and all the work-example siblings it creates.
    """

    repository: ObjectRepository
    libraries: LibraryDirectory
    urls: UrlResolver
    covers: CoverCache
    availability: AvailabilityProvider
    config: ConfigStore
    cover_providers: Sequence[CoverProvider] = field(default_factory=tuple)
