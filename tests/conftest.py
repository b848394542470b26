# ABOUTME: Shared pytest fixtures for Shelfmark tests.
# ABOUTME: Wires the recording fakes into a service bundle and provides a temporary catalog DB.

import json
from pathlib import Path

import pytest

from shelfmark.catalog.types import LibraryNode
from shelfmark.db.catalog import CatalogStore
from shelfmark.db.connection import open_catalog
from shelfmark.schema.services import WrapperServices
from shelfmark.urls import SiteUrlResolver
from tests.fixtures.catalog_data import (
    CATALOG_DUMP,
    ROSE_AUDIOBOOK,
    ROSE_HARDBACK,
    ROSE_PAPERBACK,
)
from tests.fixtures.fakes import (
    BASE_URL,
    FakeAvailability,
    FakeConfig,
    FakeCoverCache,
    FakeCoverProvider,
    FakeLibraries,
    FakeRepository,
)


@pytest.fixture
def repository() -> FakeRepository:
    """Repository holding the three Name of the Rose editions in one collection."""
    repo = FakeRepository()
    repo.add_collection("work:rose", [ROSE_HARDBACK, ROSE_PAPERBACK, ROSE_AUDIOBOOK])
    return repo


@pytest.fixture
def availability() -> FakeAvailability:
    return FakeAvailability(
        {ROSE_HARDBACK.source_id: True, ROSE_PAPERBACK.source_id: False}
    )


@pytest.fixture
def libraries() -> FakeLibraries:
    return FakeLibraries([LibraryNode(5, "A"), LibraryNode(7, "B")])


@pytest.fixture
def cover_cache(tmp_path: Path) -> FakeCoverCache:
    return FakeCoverCache(tmp_path / "covers")


@pytest.fixture
def cover_provider() -> FakeCoverProvider:
    return FakeCoverProvider()


@pytest.fixture
def services(
    repository: FakeRepository,
    libraries: FakeLibraries,
    availability: FakeAvailability,
    cover_cache: FakeCoverCache,
    cover_provider: FakeCoverProvider,
) -> WrapperServices:
    """Service bundle wired entirely from fakes."""
    return WrapperServices(
        repository=repository,
        libraries=libraries,
        urls=SiteUrlResolver(BASE_URL, files_root=cover_cache.root),
        covers=cover_cache,
        availability=availability,
        config=FakeConfig(),
        cover_providers=(cover_provider,),
    )


@pytest.fixture
def store(tmp_path: Path) -> CatalogStore:
    """A CatalogStore backed by a temporary database."""
    conn = open_catalog(tmp_path / "catalog.db")
    return CatalogStore(conn)


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """The sample catalog dump written to disk."""
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(CATALOG_DUMP), encoding="utf-8")
    return path
