# ABOUTME: Unit tests for cover provider fan-out and the local directory provider.
# ABOUTME: Checks short-circuiting, protocol compliance and ISBN/source-id file matching.

from pathlib import Path

import pytest

from shelfmark.covers.providers import (
    CoverProvider,
    LocalDirectoryCoverProvider,
    any_cover_available,
)
from tests.fixtures.catalog_data import ROSE_AUDIOBOOK, ROSE_HARDBACK
from tests.fixtures.fakes import FakeCoverProvider


class BrokenProvider:
    """Cover provider whose backend is down."""

    @property
    def name(self) -> str:
        return "broken"

    def check_availability(self, obj) -> bool:
        raise RuntimeError("provider down")


class TestAnyCoverAvailable:
    """Tests for any_cover_available()."""

    def test_no_providers(self) -> None:
        """With no providers there is no cover."""
        assert any_cover_available([], ROSE_HARDBACK) is False

    def test_stops_at_first_positive(self) -> None:
        """Providers after the first positive answer are not asked."""
        first = FakeCoverProvider("first", available=[ROSE_HARDBACK.id])
        second = FakeCoverProvider("second")
        assert any_cover_available([first, second], ROSE_HARDBACK) is True
        assert second.checked == []

    def test_all_negative(self) -> None:
        """Every provider is asked when none has a cover."""
        providers = [FakeCoverProvider("a"), FakeCoverProvider("b")]
        assert any_cover_available(providers, ROSE_HARDBACK) is False
        assert all(p.checked == [ROSE_HARDBACK.id] for p in providers)

    def test_provider_errors_propagate(self) -> None:
        """A failing provider is not silently treated as negative."""
        with pytest.raises(RuntimeError, match="provider down"):
            any_cover_available([BrokenProvider()], ROSE_HARDBACK)


class TestLocalDirectoryCoverProvider:
    """Tests for LocalDirectoryCoverProvider."""

    def test_satisfies_protocol(self, tmp_path: Path) -> None:
        """LocalDirectoryCoverProvider is a CoverProvider."""
        assert isinstance(LocalDirectoryCoverProvider(tmp_path), CoverProvider)

    def test_matches_normalized_isbn(self, tmp_path: Path) -> None:
        """Hyphenated ISBNs match digit-only file names."""
        (tmp_path / "9780151446476.png").write_bytes(b"png")
        assert LocalDirectoryCoverProvider(tmp_path).check_availability(ROSE_HARDBACK) is True

    def test_matches_source_id(self, tmp_path: Path) -> None:
        """Objects without ISBNs match by source id."""
        (tmp_path / f"{ROSE_AUDIOBOOK.source_id}.jpg").write_bytes(b"jpg")
        assert LocalDirectoryCoverProvider(tmp_path).check_availability(ROSE_AUDIOBOOK) is True

    def test_no_match(self, tmp_path: Path) -> None:
        """Unrelated files are ignored."""
        (tmp_path / "unrelated.jpg").write_bytes(b"jpg")
        assert LocalDirectoryCoverProvider(tmp_path).check_availability(ROSE_HARDBACK) is False

    def test_missing_directory(self, tmp_path: Path) -> None:
        """A missing directory means no covers."""
        provider = LocalDirectoryCoverProvider(tmp_path / "missing")
        assert provider.check_availability(ROSE_HARDBACK) is False
