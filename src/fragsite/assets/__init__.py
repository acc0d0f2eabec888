"""Asset stores — the static file collaborators the site reads from.

Every store answers ``await store.fetch(path)`` with an ``AssetResponse``.
"""

from fragsite.assets.directory import DirectoryAssetStore
from fragsite.assets.memory import MemoryAssetStore
from fragsite.assets.store import AssetResponse, AssetStore

__all__ = ["AssetResponse", "AssetStore", "DirectoryAssetStore", "MemoryAssetStore"]
