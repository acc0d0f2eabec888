"""``fragsite index`` — write the component manifest."""

import argparse
import sys

from fragsite.components.manifest import write_manifest


def run_index(args: argparse.Namespace) -> None:
    """Scan ``args.components_dir`` and write ``_index.json``."""
    try:
        out, slugs = write_manifest(args.components_dir, args.output)
    except OSError as exc:
        print(f"[index] failed: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(f"[index] {len(slugs)} components -> {out}")
