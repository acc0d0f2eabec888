"""Error conversion for the request pipeline.

Maps ``HTTPError`` exceptions and unexpected failures to plain-text
responses. Nothing propagates past the ASGI handler.
"""

import logging

from fragsite.errors import HTTPError
from fragsite.http.request import Request
from fragsite.http.response import PLAIN_TEXT, Response

logger = logging.getLogger("fragsite.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Plain-text response carrying the error detail."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)
    resp = Response(
        body=exc.detail or f"Error {exc.status}",
        status=exc.status,
        content_type=PLAIN_TEXT,
    )
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)
    detail = str(exc) or type(exc).__name__
    return Response(
        body=f"Internal Error\n\n{detail}",
        status=500,
        content_type=PLAIN_TEXT,
    )
