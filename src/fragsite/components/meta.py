"""Component metadata.

Every field of ``ComponentMeta`` except ``slug`` is a pure function of the
slug, so the manifest (a flat list of slugs) is the only source of truth.
"""

import unicodedata
from dataclasses import dataclass

INDEX_SLUG = "index"
INDEX_TITLE = "BDS Bootstrap Tokens – Overview"

# Fragment directory and extension, as public URL pieces
COMPONENTS_DIR = "/components"
FRAGMENT_EXT = ".html"


@dataclass(frozen=True, slots=True)
class ComponentMeta:
    """One discoverable fragment.

    Attributes:
        slug: Identifier derived from the fragment filename.
        path: Public route (``/`` for the index slug).
        title: Human-readable label.
        file: Canonical fragment location in the asset store.
    """

    slug: str
    path: str
    title: str
    file: str

    @property
    def is_index(self) -> bool:
        return self.slug == INDEX_SLUG


def slug_to_title(slug: str) -> str:
    """Capitalize each hyphen-separated word: ``slide-typography`` -> ``Slide Typography``.

    Only the first character of each word changes case; the rest is kept.
    """
    return " ".join(part[:1].upper() + part[1:] for part in slug.split("-"))


def to_meta(slug: str) -> ComponentMeta:
    """Build the ``ComponentMeta`` for *slug*."""
    if slug == INDEX_SLUG:
        return ComponentMeta(slug=slug, path="/", title=INDEX_TITLE, file=fragment_file(slug))
    return ComponentMeta(
        slug=slug,
        path=f"/{slug}",
        title=slug_to_title(slug),
        file=fragment_file(slug),
    )


def fragment_file(slug: str) -> str:
    return f"{COMPONENTS_DIR}/{slug}{FRAGMENT_EXT}"


def title_sort_key(meta: ComponentMeta) -> tuple[str, tuple[str, ...], tuple[bool, ...]]:
    """Collation key for ``meta.title``, compared level by level.

    Base letters first (accents and case ignored, so "Émail" sorts with
    "email" ahead of "Zeta"), then accents (unaccented first), then case
    (lowercase first).
    """
    bases: list[str] = []
    marks: list[str] = []
    for char in unicodedata.normalize("NFKD", meta.title.casefold()):
        if unicodedata.combining(char) and marks:
            marks[-1] += char
        else:
            bases.append(char)
            marks.append("")
    cases = tuple(char.isupper() for char in meta.title)
    return "".join(bases), tuple(marks), cases


def sort_by_title(components: list[ComponentMeta]) -> tuple[ComponentMeta, ...]:
    """Sort by title; ``sorted`` is stable so ties keep their input order."""
    return tuple(sorted(components, key=title_sort_key))
