"""The shared page shell wrapped around every fragment.

Fragments are trusted, versioned, author-controlled content: the body is
placed verbatim, never escaped. Do not route untrusted content through
``render_page`` without adding escaping first.
"""

from dataclasses import dataclass
from html import escape

BOOTSTRAP_VERSION = "5.3.3"
BOOTSTRAP_CDN = "https://cdn.jsdelivr.net"
BOOTSTRAP_CSS = f"{BOOTSTRAP_CDN}/npm/bootstrap@{BOOTSTRAP_VERSION}/dist/css/bootstrap.min.css"
BOOTSTRAP_CSS_INTEGRITY = "sha384-QWTKZyjpPEjISv5WaRU9OFeRpok6YctnYmDr5pNlyT2bRjXh0JMhjY6hW+ALEwIH"
BOOTSTRAP_JS = f"{BOOTSTRAP_CDN}/npm/bootstrap@{BOOTSTRAP_VERSION}/dist/js/bootstrap.bundle.min.js"
BOOTSTRAP_JS_INTEGRITY = "sha384-pprn3073KE6tl6bjs2QrFaJGz5/SUsLqktiwsUTF55Jfv3qYSDhgCecCxMW52nD2"


@dataclass(frozen=True, slots=True)
class ShellAssets:
    """External references placed in every page.

    ``stylesheet`` is the layout/typography sheet served from the asset
    store. ``bootstrap`` adds the pinned component-library CSS and JS.
    """

    stylesheet: str = "/brand-tokens.css"
    bootstrap: bool = True


DEFAULT_SHELL = ShellAssets()


def render_page(title: str, body: str, shell: ShellAssets = DEFAULT_SHELL) -> str:
    """Wrap *body* in the full HTML document."""
    head_links = []
    if shell.bootstrap:
        head_links.append(
            f'<link href="{BOOTSTRAP_CSS}" rel="stylesheet"\n'
            f'  integrity="{BOOTSTRAP_CSS_INTEGRITY}" crossorigin="anonymous"/>'
        )
    head_links.append(f'<link rel="stylesheet" href="{escape(shell.stylesheet)}"/>')

    scripts = ""
    if shell.bootstrap:
        scripts = (
            f'<script src="{BOOTSTRAP_JS}"\n'
            f'  integrity="{BOOTSTRAP_JS_INTEGRITY}" crossorigin="anonymous"></script>\n'
        )

    links = "\n".join(head_links)
    return (
        "<!doctype html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8"/><meta name="viewport" content="width=device-width, initial-scale=1"/>\n'
        f"<title>{escape(title)}</title>\n"
        f"{links}\n"
        "</head>\n"
        '<body class="container my-4">\n'
        f"{body}\n"
        f"{scripts}"
        "</body></html>"
    )
