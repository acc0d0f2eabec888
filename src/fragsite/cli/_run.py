"""``fragsite run`` / ``fragsite serve`` — development or production server."""

import argparse
import sys
from dataclasses import replace

from fragsite.cli._resolve import resolve_site
from fragsite.config import SiteConfig
from fragsite.site import Site


def run_server(args: argparse.Namespace) -> None:
    """Start a pounce server for the resolved Site.

    ``run`` resolves ``args.site``; ``serve`` builds a Site over
    ``args.assets_dir`` from ``FRAGSITE_*`` environment defaults.
    Development mode (reload) is used when the site's config has
    ``debug=True`` and ``--production`` is not given.
    """
    app_path: str | None = None
    if args.command == "run":
        try:
            site = resolve_site(args.site)
        except (ModuleNotFoundError, AttributeError, TypeError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc
        app_path = args.site
    else:
        config = replace(SiteConfig.from_env(), assets_dir=args.assets_dir, debug=args.debug)
        site = Site(config)

    host = args.host or site.config.host
    port = args.port or site.config.port

    if args.production or not site.config.debug:
        from fragsite.server.production import run_production_server

        run_production_server(
            site,
            host=host,
            port=port,
            workers=args.workers if args.workers is not None else site.config.workers,
            log_level=site.config.log_level,
            log_format=site.config.log_format,
        )
    else:
        from fragsite.server.dev import run_dev_server

        run_dev_server(site, host, port, reload=True, app_path=app_path)
