# ABOUTME: Cover provider plugins that report whether a cover exists for an object.
# ABOUTME: Providers only check availability; none of them download anything here.

import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from shelfmark.catalog.types import CatalogObject

logger = logging.getLogger(__name__)

_ISBN_STRIP_RE = re.compile(r"[\s-]")
_IMAGE_SUFFIXES = (".jpg", ".jpeg", ".png", ".gif", ".webp")


@runtime_checkable
class CoverProvider(Protocol):
    """Protocol for cover sources consulted when no cover is cached yet."""

    @property
    def name(self) -> str: ...

    def check_availability(self, obj: CatalogObject) -> bool: ...


def any_cover_available(providers: Iterable[CoverProvider], obj: CatalogObject) -> bool:
    """Ask each provider in turn; True as soon as one reports a cover.

    Provider exceptions propagate to the caller.
    """
    for provider in providers:
        if provider.check_availability(obj):
            logger.debug("Cover provider %s has a cover for %s", provider.name, obj.id)
            return True
    return False


class LocalDirectoryCoverProvider:
    """Reports covers present in a directory of pre-fetched images.

    Files are named by normalized ISBN (e.g. 9783161484100.jpg) or by the
    object's source id.
    """

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    @property
    def name(self) -> str:
        return "local"

    def _candidate_stems(self, obj: CatalogObject) -> list[str]:
        stems = [_ISBN_STRIP_RE.sub("", isbn) for isbn in obj.isbns]
        stems.append(obj.source_id)
        return [stem for stem in stems if stem]

    def check_availability(self, obj: CatalogObject) -> bool:
        for stem in self._candidate_stems(obj):
            for suffix in _IMAGE_SUFFIXES:
                if (self._directory / f"{stem}{suffix}").is_file():
                    return True
        return False
