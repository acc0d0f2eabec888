"""Component index — the ordered set of known components.

Sources are tried in order and the first non-empty slug list wins:

1. ``GeneratedIndexSource`` — the build-generated ``/components/_index.json``
   (a flat JSON array of slugs) fetched from the asset store.
2. ``LegacyManifestSource`` — a static-content key listing whose keys are
   asset paths (``components/<slug>.html``).
3. The synthetic ``index`` entry, so the home page always has a route.

The result is computed once per process and then only read.
"""

import json
import logging
import threading
from collections.abc import Mapping, Sequence
from typing import Protocol

from fragsite.assets.store import AssetStore
from fragsite.components.meta import (
    COMPONENTS_DIR,
    FRAGMENT_EXT,
    INDEX_SLUG,
    ComponentMeta,
    sort_by_title,
    to_meta,
)
from fragsite.errors import ManifestUnavailable

logger = logging.getLogger("fragsite.components")

GENERATED_INDEX_PATH = f"{COMPONENTS_DIR}/_index.json"


class ComponentSource(Protocol):
    """A strategy that may produce component slugs.

    Returns ``None`` (or an empty list) when it has nothing to offer.
    May raise ``ManifestUnavailable``; the index treats that as ``None``.
    """

    async def slugs(self) -> list[str] | None: ...


class GeneratedIndexSource:
    """Reads the generated slug manifest from the asset store."""

    __slots__ = ("_path", "_store")

    def __init__(self, store: AssetStore, path: str = GENERATED_INDEX_PATH) -> None:
        self._store = store
        self._path = path

    async def slugs(self) -> list[str] | None:
        try:
            asset = await self._store.fetch(self._path)
        except OSError as exc:
            msg = f"Fetching {self._path} failed: {exc}"
            raise ManifestUnavailable(msg) from exc
        if not asset.ok:
            logger.debug("Generated index %s unavailable (%d)", self._path, asset.status)
            return None
        try:
            data = asset.json()
        except ValueError as exc:
            msg = f"{self._path} is not valid JSON: {exc}"
            raise ManifestUnavailable(msg) from exc
        return _validate_slugs(data, self._path)


class LegacyManifestSource:
    """Recovers slugs from a legacy key listing.

    *manifest* is a mapping whose keys are asset paths, or its JSON text.
    Keys outside ``components/``, without the fragment extension, or
    pointing at hidden files are ignored.
    """

    __slots__ = ("_manifest",)

    def __init__(self, manifest: Mapping[str, object] | str | None) -> None:
        self._manifest = manifest

    async def slugs(self) -> list[str] | None:
        manifest = self._manifest
        if not manifest:
            return None
        if isinstance(manifest, str):
            try:
                manifest = json.loads(manifest)
            except ValueError as exc:
                msg = f"Legacy manifest is not valid JSON: {exc}"
                raise ManifestUnavailable(msg) from exc
            if not isinstance(manifest, dict):
                msg = "Legacy manifest must be a JSON object"
                raise ManifestUnavailable(msg)
        return sorted(slug for key in manifest if (slug := legacy_key_to_slug(key)) is not None)


def legacy_key_to_slug(key: str) -> str | None:
    """``components/foo.html`` -> ``foo``; ``None`` for anything else."""
    prefix = COMPONENTS_DIR.lstrip("/") + "/"
    if not key.startswith(prefix) or not key.endswith(FRAGMENT_EXT) or "/." in key:
        return None
    return key[len(prefix) : -len(FRAGMENT_EXT)]


def _validate_slugs(data: object, origin: str) -> list[str]:
    if not isinstance(data, list) or not all(isinstance(s, str) for s in data):
        msg = f"{origin} must be a JSON array of strings"
        raise ManifestUnavailable(msg)
    return data


class ComponentIndex:
    """Lazily built, process-wide component index.

    ``discover()`` runs the sources once and caches the sorted result.
    There is no invalidation; a redeploy starts a fresh process.

    Thread safety:
        The cached tuple is published under a lock with a double-check,
        so the first completed build wins and every caller sees the same
        value. Concurrent cold starts may each run the sources; the build
        is deterministic, so the duplicate work is harmless.
    """

    __slots__ = ("_components", "_lock", "_sources")

    def __init__(self, sources: Sequence[ComponentSource]) -> None:
        self._sources = tuple(sources)
        self._components: tuple[ComponentMeta, ...] | None = None
        self._lock = threading.Lock()

    @property
    def is_built(self) -> bool:
        return self._components is not None

    async def discover(self) -> tuple[ComponentMeta, ...]:
        """Return the component index, building it on first use."""
        components = self._components
        if components is not None:
            return components

        built = await self._build()
        with self._lock:
            if self._components is None:
                self._components = built
            return self._components

    async def lookup(self, slug: str) -> ComponentMeta | None:
        """The indexed entry for *slug*, or ``None``."""
        for meta in await self.discover():
            if meta.slug == slug:
                return meta
        return None

    def reset(self) -> None:
        """Drop the cached index. Tests only."""
        with self._lock:
            self._components = None

    async def _build(self) -> tuple[ComponentMeta, ...]:
        for source in self._sources:
            name = type(source).__name__
            try:
                slugs = await source.slugs()
            except ManifestUnavailable as exc:
                logger.warning("Component source %s failed: %s", name, exc)
                continue
            if slugs:
                logger.info("Component index built from %s (%d entries)", name, len(slugs))
                return sort_by_title(_unique_metas(slugs))
        logger.warning("No component source yielded data; serving the home page only")
        return (to_meta(INDEX_SLUG),)


def _unique_metas(slugs: list[str]) -> list[ComponentMeta]:
    seen: set[str] = set()
    metas: list[ComponentMeta] = []
    for slug in slugs:
        if slug not in seen:
            seen.add(slug)
            metas.append(to_meta(slug))
    return metas
