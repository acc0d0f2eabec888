"""Production server on pounce (multi-worker)."""


def run_production_server(
    site: object,
    host: str = "0.0.0.0",
    port: int = 8000,
    workers: int = 0,
    *,
    log_level: str = "info",
    log_format: str = "text",
) -> None:
    """Run a Site in production mode.

    Every worker builds its own component index on first use.

    Args:
        site: ASGI callable (fragsite Site instance).
        host: Bind address.
        port: Bind port.
        workers: Worker count (0 = auto-detect from CPU count).
        log_level: Log level (debug, info, warning, error, critical).
        log_format: Log format ("json" or "text").
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        log_level=log_level,
        log_format=log_format,
    )
    server = Server(config, site)
    server.run()
