"""Fragsite exception hierarchy.

Shared across the component index, fragment loader, and ASGI handler so
every module raises and catches the same types.
"""

from dataclasses import dataclass


class FragsiteError(Exception):
    """Base for all fragsite-specific errors."""


class ConfigurationError(FragsiteError):
    """Raised when site configuration is invalid."""


class ManifestUnavailable(FragsiteError):  # noqa: N818
    """A component manifest source is missing or malformed.

    Never escapes the component index: the index degrades to the next
    source and, ultimately, to the synthetic ``index`` entry.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(FragsiteError):
    """An error that maps directly to an HTTP status code.

    The ASGI handler converts these to plain-text responses carrying
    ``detail`` as the body.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class FragmentNotFound(HTTPError):  # noqa: N818
    """404 — the component fragment file is missing from the asset store.

    The detail names the canonical fragment path so content authors can
    see which file to add.
    """

    file: str

    def __init__(self, file: str) -> None:
        detail = (
            f"Component not found. Unable to load {file}.\n"
            f"Make sure it exists at public{file} and re-deploy."
        )
        super().__init__(status=404, detail=detail)
        object.__setattr__(self, "file", file)
