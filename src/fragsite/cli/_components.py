"""``fragsite components`` — print the component index."""

import argparse
from dataclasses import replace

import anyio

from fragsite.config import SiteConfig
from fragsite.site import Site


def run_components(args: argparse.Namespace) -> None:
    """Build the component index for ``args.assets_dir`` and print it.

    Uses the same sources as the server, so a missing or broken manifest
    shows up here as the single ``index`` entry.
    """
    config = replace(SiteConfig.from_env(), assets_dir=args.assets_dir)
    site = Site(config)
    components = anyio.run(site.index.discover)

    rows = [(c.slug, c.path, c.title) for c in components]
    max_slug = max(max(len(r[0]) for r in rows), 4)  # "SLUG" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_slug}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("SLUG", "PATH", "TITLE"))
    sep_len = max_slug + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for slug, path, title in rows:
        print(fmt.format(slug, path, title))
