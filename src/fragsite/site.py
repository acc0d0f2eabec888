"""Fragsite site application.

Mutable during setup (middleware registration). Frozen when the first
ASGI call arrives or ``run()`` is invoked.
"""

import logging
import threading
from collections.abc import Callable, Sequence
from typing import Any

from fragsite._internal.asgi import Receive, Scope, Send
from fragsite.assets.directory import DirectoryAssetStore
from fragsite.assets.store import AssetStore
from fragsite.components.index import (
    ComponentIndex,
    ComponentSource,
    GeneratedIndexSource,
    LegacyManifestSource,
)
from fragsite.components.router import ComponentRouter
from fragsite.config import SiteConfig
from fragsite.errors import ConfigurationError
from fragsite.middleware.protocol import Middleware
from fragsite.rendering.shell import ShellAssets
from fragsite.server.handler import handle_request
from fragsite.server.pipeline import Pipeline

logger = logging.getLogger("fragsite.server")


class Site:
    """A fragment-wrapping static site.

    Component paths (no file extension) are rendered as full pages from
    ``/components/<slug>.html`` fragments; every other path is served from
    the asset store unchanged.

    Usage::

        from fragsite import Site, SiteConfig

        site = Site(SiteConfig(assets_dir="public"))

    With an explicit store and component sources::

        site = Site(store=MemoryAssetStore({...}))

    Thread safety:
        Setup is single-threaded. The freeze uses a Lock + double-check so
        exactly one thread captures the middleware chain even when several
        workers deliver their first request concurrently.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_middleware",
        "_middleware_list",
        "config",
        "index",
        "pipeline",
        "router",
        "store",
    )

    def __init__(
        self,
        config: SiteConfig | None = None,
        *,
        store: AssetStore | None = None,
        sources: Sequence[ComponentSource] | None = None,
    ) -> None:
        self.config: SiteConfig = config or SiteConfig()
        self.store: AssetStore = store or DirectoryAssetStore(
            self.config.assets_dir, cache_control=self.config.cache_control
        )
        if sources is None:
            sources = (
                GeneratedIndexSource(self.store),
                LegacyManifestSource(self.config.legacy_manifest),
            )
        self.index = ComponentIndex(sources)
        self.router = ComponentRouter(self.index)
        self.pipeline = Pipeline(
            self.store,
            self.router,
            ShellAssets(stylesheet=self.config.stylesheet, bootstrap=self.config.bootstrap),
        )
        self._middleware_list: list[Middleware] = []
        self._middleware: tuple[Callable[..., Any], ...] = ()
        self._frozen = False
        self._freeze_lock = threading.Lock()

    # -- Setup --

    def add_middleware(self, middleware: Middleware) -> None:
        """Add a middleware around the pipeline. First added is outermost."""
        if self._frozen:
            msg = "Cannot add middleware after the site has started serving"
            raise ConfigurationError(msg)
        self._middleware_list.append(middleware)

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start a pounce server (dev when ``config.debug``, else production)."""
        self._ensure_frozen()
        _host = host or self.config.host
        _port = port or self.config.port
        if self.config.debug:
            from fragsite.server.dev import run_dev_server

            run_dev_server(self, _host, _port)
        else:
            from fragsite.server.production import run_production_server

            run_production_server(
                self,
                _host,
                _port,
                self.config.workers,
                log_level=self.config.log_level,
                log_format=self.config.log_format,
            )

    # -- ASGI --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()
        await handle_request(
            scope,
            receive,
            send,
            dispatch=self.pipeline,
            middleware=self._middleware,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol, optionally warming the index."""
        self._ensure_frozen()
        while True:
            message = await receive()
            msg_type = message["type"]
            if msg_type == "lifespan.startup":
                try:
                    if self.config.warm_index:
                        components = await self.index.discover()
                        logger.info("Component index warmed: %d components", len(components))
                except Exception as exc:
                    logger.exception("Lifespan startup failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    def _ensure_frozen(self) -> None:
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._middleware = tuple(self._middleware_list)
            self._frozen = True
