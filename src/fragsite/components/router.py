"""Request path -> component routing.

Paths with a file extension are never components; the router defers them
to the asset store by returning ``None``. Every other path maps to a
component: the indexed entry when the slug is known (keeping its friendly
title), otherwise one synthesised from the slug so the fragment load
still runs and produces a proper 404.
"""

import re

from fragsite.components.index import ComponentIndex
from fragsite.components.meta import INDEX_SLUG, ComponentMeta, to_meta

_EXTENSION_RE = re.compile(r"\.[a-zA-Z0-9]+\Z")


def normalize_path(path: str) -> str:
    """Strip one trailing slash from any path other than ``/``."""
    if path != "/" and path.endswith("/"):
        return path[:-1]
    return path


def has_file_extension(path: str) -> bool:
    return _EXTENSION_RE.search(path) is not None


def path_to_slug(path: str) -> str:
    """``/`` -> ``index``; ``/foo`` -> ``foo``. Expects a normalized path."""
    if path == "/":
        return INDEX_SLUG
    return path[1:] if path.startswith("/") else path


class ComponentRouter:
    """Resolves request paths against a ``ComponentIndex``."""

    __slots__ = ("_index",)

    def __init__(self, index: ComponentIndex) -> None:
        self._index = index

    @property
    def index(self) -> ComponentIndex:
        return self._index

    async def resolve(self, request_path: str) -> ComponentMeta | None:
        """Map *request_path* to a component, or ``None`` to defer to assets."""
        path = normalize_path(request_path)
        if has_file_extension(path):
            return None
        slug = path_to_slug(path)
        meta = await self._index.lookup(slug)
        return meta if meta is not None else to_meta(slug)
