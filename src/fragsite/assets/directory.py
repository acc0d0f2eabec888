"""Directory-backed asset store.

Serves files from a directory on disk with non-blocking reads through
``anyio.Path``. Directory paths resolve to their ``index.html``.

Security: resolves symlinks and verifies the final path is within the
configured directory to prevent path traversal.
"""

import logging
from pathlib import Path

import anyio

from fragsite.assets.store import AssetResponse, guess_content_type

logger = logging.getLogger("fragsite.assets")


class DirectoryAssetStore:
    """Asset store that reads files under *directory*.

    Usage::

        store = DirectoryAssetStore("./public")
        asset = await store.fetch("/brand-tokens.css")
    """

    __slots__ = ("_cache_control", "_directory", "_index")

    def __init__(
        self,
        directory: str | Path,
        *,
        index: str = "index.html",
        cache_control: str = "public, max-age=3600",
    ) -> None:
        self._directory = Path(directory).resolve()
        self._index = index
        self._cache_control = cache_control

    @property
    def directory(self) -> Path:
        return self._directory

    async def fetch(self, path: str) -> AssetResponse:
        relative = path.lstrip("/")
        root = anyio.Path(self._directory)
        file_path = await (root / relative).resolve() if relative else root

        if not Path(file_path).is_relative_to(self._directory):
            logger.warning("Refusing asset path outside %s: %s", self._directory, path)
            return AssetResponse.not_found()

        if await file_path.is_dir():
            file_path = file_path / self._index

        if not await file_path.is_file():
            return AssetResponse.not_found()

        body = await file_path.read_bytes()
        return AssetResponse(
            status=200,
            body=body,
            content_type=guess_content_type(str(file_path)),
            headers=(("Cache-Control", self._cache_control),),
        )
