# ABOUTME: Cover image package: cached image lookup, provider checks and dimensions.
# ABOUTME: Exports the cache and provider protocols with their file-based implementations.

from shelfmark.covers.cache import CoverCache, FileCoverCache
from shelfmark.covers.dimensions import image_dimensions
from shelfmark.covers.providers import (
    CoverProvider,
    LocalDirectoryCoverProvider,
    any_cover_available,
)

__all__ = [
    "CoverCache",
    "CoverProvider",
    "FileCoverCache",
    "LocalDirectoryCoverProvider",
    "any_cover_available",
    "image_dimensions",
]
