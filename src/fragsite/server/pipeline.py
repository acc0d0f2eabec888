"""Request dispatch: component pages first, asset passthrough otherwise.

request -> router -> component index -> fragment loader
        -> (home only) listing injection -> page shell -> response

Paths the router declines go straight to the asset store.
"""

from fragsite.assets.store import AssetStore
from fragsite.components.listing import compose_listing, inject_listing
from fragsite.components.loader import load_fragment
from fragsite.components.meta import ComponentMeta
from fragsite.components.router import ComponentRouter
from fragsite.http.request import Request
from fragsite.http.response import HTML, Response
from fragsite.rendering.shell import DEFAULT_SHELL, ShellAssets, render_page


class Pipeline:
    """The innermost handler of the middleware chain."""

    __slots__ = ("_router", "_shell", "_store")

    def __init__(
        self,
        store: AssetStore,
        router: ComponentRouter,
        shell: ShellAssets = DEFAULT_SHELL,
    ) -> None:
        self._store = store
        self._router = router
        self._shell = shell

    async def __call__(self, request: Request) -> Response:
        component = await self._router.resolve(request.path)
        if component is not None:
            return await self.serve_component(component)
        asset = await self._store.fetch(request.path)
        return asset.to_response()

    async def serve_component(self, component: ComponentMeta) -> Response:
        """Render *component* as a full page.

        Raises:
            FragmentNotFound: If its fragment file is missing.
        """
        fragment = await load_fragment(self._store, component)
        if component.is_index:
            components = await self._router.index.discover()
            fragment = inject_listing(fragment, compose_listing(components))
        html = render_page(component.title, fragment, self._shell)
        return Response(body=html, content_type=HTML)
