"""Asset store protocol and the response it returns.

An asset store is any object with an async ``fetch(path)`` method. No base
class required; the site checks the shape, not the lineage.
"""

import json
import mimetypes
from dataclasses import dataclass
from typing import Any, Protocol

from fragsite.http.response import PLAIN_TEXT, Response


@dataclass(frozen=True, slots=True)
class AssetResponse:
    """A fully materialised answer from an asset store."""

    status: int
    body: bytes = b""
    content_type: str = "application/octet-stream"
    headers: tuple[tuple[str, str], ...] = ()

    @property
    def ok(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status < 300

    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self.body.decode("utf-8")

    def json(self) -> Any:
        """Body parsed as JSON.

        Raises:
            ValueError: If the body is not valid JSON (``json.JSONDecodeError``
                is a ``ValueError``) or not UTF-8.
        """
        return json.loads(self.body)

    def to_response(self) -> Response:
        """Forward status, headers, and body verbatim as a ``Response``."""
        return Response(
            body=self.body,
            status=self.status,
            content_type=self.content_type,
            headers=self.headers,
        )

    @classmethod
    def not_found(cls) -> "AssetResponse":
        return cls(status=404, body=b"Not Found", content_type=PLAIN_TEXT)


class AssetStore(Protocol):
    """Protocol for asset stores.

    ``path`` is always an absolute URL path (``/components/index.html``).
    Missing assets answer a non-2xx ``AssetResponse``; they do not raise.
    """

    async def fetch(self, path: str) -> AssetResponse: ...


def guess_content_type(path: str) -> str:
    """MIME type for *path*, with ``charset=utf-8`` on text types."""
    content_type, _ = mimetypes.guess_type(path)
    if content_type is None:
        return "application/octet-stream"
    if content_type.startswith("text/") or content_type in (
        "application/json",
        "application/javascript",
    ):
        return f"{content_type}; charset=utf-8"
    return content_type
