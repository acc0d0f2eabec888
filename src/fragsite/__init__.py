"""Fragsite — wraps content-only HTML fragments in a shared page shell.

Requests without a file extension are routed to ``/components/<slug>.html``
fragments and rendered as full pages; every other path is served from the
asset store unchanged. All responses carry a fixed security header set.

Basic usage::

    from fragsite import Site, SiteConfig

    site = Site(SiteConfig(assets_dir="public"))
    site.run()
"""

__version__ = "0.1.0"
__all__ = [
    "AssetResponse",
    "ComponentMeta",
    "ConfigurationError",
    "DirectoryAssetStore",
    "FragmentNotFound",
    "FragsiteError",
    "HTTPError",
    "ManifestUnavailable",
    "MemoryAssetStore",
    "Middleware",
    "Next",
    "Request",
    "Response",
    "Site",
    "SiteConfig",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fragsite`` fast while providing a clean top-level API.
    """
    if name == "Site":
        from fragsite.site import Site

        return Site

    if name == "SiteConfig":
        from fragsite.config import SiteConfig

        return SiteConfig

    if name in ("Request", "Response"):
        from fragsite import http as _http

        return getattr(_http, name)

    if name in ("AssetResponse", "DirectoryAssetStore", "MemoryAssetStore"):
        from fragsite import assets as _assets

        return getattr(_assets, name)

    if name == "ComponentMeta":
        from fragsite.components.meta import ComponentMeta

        return ComponentMeta

    if name in ("Middleware", "Next"):
        from fragsite.middleware import protocol as _mw

        return getattr(_mw, name)

    if name in (
        "ConfigurationError",
        "FragmentNotFound",
        "FragsiteError",
        "HTTPError",
        "ManifestUnavailable",
    ):
        from fragsite import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
