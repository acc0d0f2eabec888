"""Fragsite CLI — servers, manifest generation, and index inspection.

Entry point registered as ``fragsite`` in ``pyproject.toml``::

    [project.scripts]
    fragsite = "fragsite.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``fragsite`` command."""
    parser = argparse.ArgumentParser(
        prog="fragsite",
        description="Fragsite — serve HTML fragments inside a shared page shell.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- fragsite run -----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve a Site from an import string")
    run_parser.add_argument("site", help="Import string (e.g. mysite:site)")
    _add_server_flags(run_parser)

    # -- fragsite serve ---------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve an assets directory")
    serve_parser.add_argument("assets_dir", help="Directory holding components/ and assets")
    serve_parser.add_argument("--debug", action="store_true", help="Dev server with reload")
    _add_server_flags(serve_parser)

    # -- fragsite index ---------------------------------------------------
    index_parser = subparsers.add_parser("index", help="Generate components/_index.json")
    index_parser.add_argument("components_dir", help="Fragment directory to scan")
    index_parser.add_argument(
        "--output",
        default=None,
        help="Manifest path (default: <components_dir>/_index.json)",
    )

    # -- fragsite components ----------------------------------------------
    components_parser = subparsers.add_parser(
        "components", help="List the component index for an assets directory"
    )
    components_parser.add_argument("assets_dir", help="Directory holding components/")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command in ("run", "serve"):
        from fragsite.cli._run import run_server

        run_server(args)
    elif args.command == "index":
        from fragsite.cli._index import run_index

        run_index(args)
    elif args.command == "components":
        from fragsite.cli._components import run_components

        run_components(args)


def _add_server_flags(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument("--host", default=None, help="Bind host address")
    subparser.add_argument("--port", type=int, default=None, help="Bind port number")
    subparser.add_argument(
        "--production",
        action="store_true",
        help="Run in production mode (multi-worker)",
    )
    subparser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker count (0=auto-detect, production only)",
    )
