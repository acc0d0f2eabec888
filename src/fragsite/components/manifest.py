"""Offline generator for ``components/_index.json``.

Runs at build time, not per request: scans the fragment directory and
writes the flat, sorted slug array the component index reads.
"""

import json
from pathlib import Path

from fragsite.components.meta import FRAGMENT_EXT

INDEX_FILENAME = "_index.json"


def scan_slugs(components_dir: str | Path) -> list[str]:
    """Slugs for every public fragment in *components_dir*, sorted.

    Files starting with ``_`` or ``.`` are private and skipped.

    Raises:
        FileNotFoundError: If *components_dir* is not a directory.
    """
    root = Path(components_dir)
    if not root.is_dir():
        raise FileNotFoundError(f"Components directory not found: {root}")
    return sorted(
        entry.name[: -len(FRAGMENT_EXT)]
        for entry in root.iterdir()
        if entry.is_file()
        and entry.name.endswith(FRAGMENT_EXT)
        and not entry.name.startswith(("_", "."))
    )


def write_manifest(components_dir: str | Path, output: str | Path | None = None) -> tuple[Path, list[str]]:
    """Scan *components_dir* and write the manifest.

    Returns the written path and the slugs it contains.
    """
    slugs = scan_slugs(components_dir)
    out = Path(output) if output is not None else Path(components_dir) / INDEX_FILENAME
    out.write_text(json.dumps(slugs, indent=2) + "\n", encoding="utf-8")
    return out, slugs
