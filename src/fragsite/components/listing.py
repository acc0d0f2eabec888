"""Home-page component listing.

The only substitution fragments support: the index fragment may contain
``LIST_MARKER`` once, which is replaced by the generated listing. Without
the marker the listing is appended after the fragment.
"""

from collections.abc import Iterable
from html import escape

from fragsite.components.meta import ComponentMeta

LIST_MARKER = "<!-- COMPONENT_LIST -->"

_EMPTY_LISTING = """<div class="alert alert-info" role="status">
  No components listed yet. Add *.html under <code>/public/components</code>.
</div>"""


def compose_listing(components: Iterable[ComponentMeta]) -> str:
    """Render *components* (minus the index page itself) as an HTML list."""
    items = "".join(_render_item(c) for c in components if not c.is_index)
    if not items:
        return _EMPTY_LISTING
    return (
        '<div class="card"><div class="card-body">'
        f'<ul class="list-group list-group-flush">{items}</ul>'
        "</div></div>"
    )


def _render_item(component: ComponentMeta) -> str:
    title = escape(component.title)
    path = escape(component.path)
    return (
        '<li class="list-group-item d-flex align-items-center justify-content-between">\n'
        f'  <div><div class="fw-semibold">{title}</div>'
        f'<div class="text-muted small">{path}</div></div>\n'
        f'  <a class="btn btn-sm btn-outline-primary" href="{path}">View</a>\n'
        "</li>"
    )


def inject_listing(fragment: str, listing: str) -> str:
    """Replace the first ``LIST_MARKER`` in *fragment*, or append after it."""
    if LIST_MARKER in fragment:
        return fragment.replace(LIST_MARKER, listing, 1)
    return f"{fragment}\n{listing}"
