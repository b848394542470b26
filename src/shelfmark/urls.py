# ABOUTME: Maps catalog entities and cover files to absolute canonical site URLs.
# ABOUTME: Defines the UrlResolver protocol and the path-pattern based SiteUrlResolver.

from pathlib import Path
from typing import Protocol, runtime_checkable
from urllib.parse import quote, urlparse

# Path patterns per entity kind, relative to the site base URL.
_ENTITY_PATHS: dict[str, str] = {
    "object": "ting/object/{id}",
    "collection": "ting/collection/{id}",
    "node": "node/{id}",
}

_FILES_PATH = "files"


@runtime_checkable
class UrlResolver(Protocol):
    """Protocol for turning entities and stored files into absolute URLs."""

    def resolve(self, kind: str, entity_id: str | int) -> str: ...

    def file_url(self, path: Path) -> str: ...


class SiteUrlResolver:
    """Builds absolute URLs from a site base URL.

    Entity ids are percent-encoded (catalog ids contain ':' and other
    reserved characters). Files must live under files_root; they are served
    from <base_url>/files/<relative path>.
    """

    def __init__(self, base_url: str, files_root: Path | None = None) -> None:
        parsed = urlparse(base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"base_url must be an absolute http(s) URL, got {base_url!r}")
        self._base_url = base_url.rstrip("/")
        self._files_root = files_root

    @property
    def base_url(self) -> str:
        return self._base_url

    def resolve(self, kind: str, entity_id: str | int) -> str:
        """Return the absolute URL for an entity.

        Raises:
            ValueError: If kind is not a known entity kind.
        """
        try:
            pattern = _ENTITY_PATHS[kind]
        except KeyError:
            raise ValueError(f"Unknown entity kind: {kind}") from None
        path = pattern.format(id=quote(str(entity_id), safe=""))
        return f"{self._base_url}/{path}"

    def file_url(self, path: Path) -> str:
        """Return the public URL of a stored file.

        Raises:
            ValueError: If no files root is configured or path is outside it.
        """
        if self._files_root is None:
            raise ValueError("No files root configured")
        relative = path.resolve().relative_to(self._files_root.resolve())
        return f"{self._base_url}/{_FILES_PATH}/{quote(relative.as_posix())}"
