"""Development server with hot reload.

Starts a pounce ASGI server with the live Site object in single-worker
mode with reload enabled.
"""


def run_dev_server(
    site: object,
    host: str,
    port: int,
    *,
    reload: bool = True,
    reload_include: tuple[str, ...] = (".html", ".css", ".json"),
    app_path: str | None = None,
) -> None:
    """Start a pounce dev server with the given Site.

    Args:
        site: ASGI callable (fragsite Site instance).
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes.
        reload_include: Extra file extensions to watch. Fragment and
            manifest edits only show up after a reload, since the
            component index is cached for the process lifetime.
        app_path: Optional ``"module:attribute"`` import string so pounce
            can reimport the site on each reload cycle.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        reload_include=reload_include,
    )
    server = Server(config, site, app_path=app_path)
    server.run()
