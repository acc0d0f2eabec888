"""In-memory asset store.

Holds a ``path -> content`` mapping. Used by tests and by embedders that
already have their assets in memory.
"""

from collections.abc import Mapping

from fragsite.assets.store import AssetResponse, guess_content_type


class MemoryAssetStore:
    """Asset store backed by a dict.

    Usage::

        store = MemoryAssetStore({
            "/components/_index.json": '["index"]',
            "/components/index.html": "<h1>Home</h1>",
        })
    """

    __slots__ = ("_files", "fetched")

    def __init__(self, files: Mapping[str, str | bytes] | None = None) -> None:
        self._files: dict[str, bytes] = {
            _normalize(path): content.encode("utf-8") if isinstance(content, str) else content
            for path, content in (files or {}).items()
        }
        # Paths fetched so far, in order
        self.fetched: list[str] = []

    def put(self, path: str, content: str | bytes) -> None:
        """Add or replace an asset."""
        data = content.encode("utf-8") if isinstance(content, str) else content
        self._files[_normalize(path)] = data

    async def fetch(self, path: str) -> AssetResponse:
        self.fetched.append(path)
        key = _normalize(path)
        body = self._files.get(key)
        if body is None and (key == "/" or key.endswith("/")):
            body = self._files.get(key.rstrip("/") + "/index.html")
        if body is None:
            return AssetResponse.not_found()
        return AssetResponse(status=200, body=body, content_type=guess_content_type(key))


def _normalize(path: str) -> str:
    return path if path.startswith("/") else "/" + path
