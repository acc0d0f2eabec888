"""Shared fixtures: an in-memory site and an on-disk public directory."""

import json

import pytest

from fragsite.assets.memory import MemoryAssetStore
from fragsite.site import Site

MANIFEST = ["index", "slide-typography", "email-campaign"]

HOME_FRAGMENT = "<h1>Overview</h1>\n<!-- COMPONENT_LIST -->\n<p>Footer</p>"
TYPOGRAPHY_FRAGMENT = '<section class="slide"><h2>Type scale</h2></section>'
CAMPAIGN_FRAGMENT = "<table><tr><td>Hello</td></tr></table>"


@pytest.fixture
def store() -> MemoryAssetStore:
    return MemoryAssetStore(
        {
            "/components/_index.json": json.dumps(MANIFEST),
            "/components/index.html": HOME_FRAGMENT,
            "/components/slide-typography.html": TYPOGRAPHY_FRAGMENT,
            "/components/email-campaign.html": CAMPAIGN_FRAGMENT,
            "/brand-tokens.css": ":root { --brand: #0f62fe; }",
        }
    )


@pytest.fixture
def site(store: MemoryAssetStore) -> Site:
    return Site(store=store)


@pytest.fixture
def public_dir(tmp_path):
    """A public/ directory laid out the way a deployment ships it."""
    public = tmp_path / "public"
    components = public / "components"
    components.mkdir(parents=True)
    (components / "index.html").write_text(HOME_FRAGMENT)
    (components / "slide-typography.html").write_text(TYPOGRAPHY_FRAGMENT)
    (components / "email-campaign.html").write_text(CAMPAIGN_FRAGMENT)
    (components / "_draft.html").write_text("<p>draft</p>")
    (components / ".hidden.html").write_text("<p>hidden</p>")
    (components / "_index.json").write_text(json.dumps(MANIFEST))
    (public / "brand-tokens.css").write_text(":root { --brand: #0f62fe; }")
    return public


@pytest.fixture
def fragments() -> dict[str, str]:
    """Fragment bodies by slug, as stored in both fixtures above."""
    return {
        "index": HOME_FRAGMENT,
        "slide-typography": TYPOGRAPHY_FRAGMENT,
        "email-campaign": CAMPAIGN_FRAGMENT,
    }
