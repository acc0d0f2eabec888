"""Component discovery and routing.

A component is a content-only HTML fragment under ``/components/``. This
package discovers the known components, maps request paths to them, loads
their fragments, and composes the home-page listing.
"""

from fragsite.components.index import (
    ComponentIndex,
    GeneratedIndexSource,
    LegacyManifestSource,
)
from fragsite.components.listing import LIST_MARKER, compose_listing, inject_listing
from fragsite.components.loader import load_fragment
from fragsite.components.meta import INDEX_SLUG, ComponentMeta, slug_to_title, to_meta
from fragsite.components.router import ComponentRouter, has_file_extension, normalize_path

__all__ = [
    "INDEX_SLUG",
    "LIST_MARKER",
    "ComponentIndex",
    "ComponentMeta",
    "ComponentRouter",
    "GeneratedIndexSource",
    "LegacyManifestSource",
    "compose_listing",
    "has_file_extension",
    "inject_listing",
    "load_fragment",
    "normalize_path",
    "slug_to_title",
    "to_meta",
]
