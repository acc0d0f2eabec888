"""Site import resolution — resolves ``"module:attribute"`` strings to Site instances."""

import importlib

from fragsite.site import Site


def resolve_site(import_string: str) -> Site:
    """Resolve an import string to a fragsite Site instance.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to ``"site"``. Factory functions are called.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a ``Site`` or a factory
            returning one.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "site"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Site):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Site):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a fragsite.Site instance"
        raise TypeError(msg)

    return obj
