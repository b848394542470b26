# ABOUTME: Filesystem cover cache: deterministic image paths and negative-result markers.
# ABOUTME: Only reports what is already on disk; fetching covers happens elsewhere.

import logging
import time
from pathlib import Path
from typing import Protocol, runtime_checkable
from urllib.parse import quote

logger = logging.getLogger(__name__)

DEFAULT_NEGATIVE_TTL = 24 * 60 * 60  # seconds


@runtime_checkable
class CoverCache(Protocol):
    """Protocol for looking up materialized cover images."""

    def has_negative_marker(self, object_id: str) -> bool: ...

    def image_path(self, object_id: str) -> Path: ...


def _file_name(object_id: str) -> str:
    """Make an object id safe to use as a single path component."""
    return quote(object_id, safe="")


class FileCoverCache:
    """Cover images stored under a root directory.

    Layout:
        <root>/objects/<quoted id>.jpg   cover image
        <root>/negative/<quoted id>      marker: no cover exists (expires after ttl)
    """

    def __init__(self, root: Path, *, negative_ttl: float = DEFAULT_NEGATIVE_TTL) -> None:
        self._root = root
        self._negative_ttl = negative_ttl

    @property
    def root(self) -> Path:
        return self._root

    def image_path(self, object_id: str) -> Path:
        """Deterministic path of the cover image for an object (may not exist)."""
        return self._root / "objects" / f"{_file_name(object_id)}.jpg"

    def _marker_path(self, object_id: str) -> Path:
        return self._root / "negative" / _file_name(object_id)

    def has_negative_marker(self, object_id: str) -> bool:
        """Whether a fresh "no cover" marker exists for the object."""
        marker = self._marker_path(object_id)
        try:
            age = time.time() - marker.stat().st_mtime
        except FileNotFoundError:
            return False
        if age > self._negative_ttl:
            logger.debug("Negative cover marker for %s expired (%.0fs old)", object_id, age)
            return False
        return True

    def mark_negative(self, object_id: str) -> None:
        """Record that no provider has a cover for the object."""
        marker = self._marker_path(object_id)
        marker.parent.mkdir(parents=True, exist_ok=True)
        marker.touch()

    def clear_negative(self, object_id: str) -> None:
        """Remove a negative marker. Missing markers are ignored."""
        self._marker_path(object_id).unlink(missing_ok=True)

    def store_image(self, object_id: str, data: bytes) -> Path:
        """Write cover image bytes for an object and clear any negative marker."""
        path = self.image_path(object_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        self.clear_negative(object_id)
        return path
