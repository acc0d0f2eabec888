"""Design System — component pages served from public/components.

Run:
    python app.py

Then open http://127.0.0.1:8000/ for the component listing. Regenerate
the listing after adding a fragment with:

    fragsite index public/components
"""

from pathlib import Path

from fragsite import Site, SiteConfig

PUBLIC_DIR = Path(__file__).parent / "public"

site = Site(SiteConfig(assets_dir=PUBLIC_DIR, debug=True))

if __name__ == "__main__":
    site.run()
