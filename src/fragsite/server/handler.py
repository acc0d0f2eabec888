"""ASGI handler — translates ASGI scope/messages to fragsite types.

The only component that touches raw ASGI HTTP messages. Builds the
Request, runs the middleware chain around the pipeline, converts errors
to responses, finalizes headers, and sends the result.
"""

from collections.abc import Callable
from typing import Any

from fragsite._internal.asgi import Receive, Scope, Send
from fragsite.errors import HTTPError
from fragsite.http.request import Request
from fragsite.http.response import Response
from fragsite.middleware.protocol import Next
from fragsite.middleware.security_headers import finalize
from fragsite.server.errors import handle_http_error, handle_internal_error
from fragsite.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    dispatch: Next,
    middleware: tuple[Callable[..., Any], ...] = (),
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        # Wrap middleware around the dispatch; first added is outermost
        handler = dispatch
        for mw in reversed(middleware):
            outer = handler
            mw_ref = mw

            async def make_next(req: Request, _mw: Any = mw_ref, _next: Next = outer) -> Response:
                return await _mw(req, _next)

            handler = make_next

        response = await handler(request)

    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    await send_response(finalize(response), send, method=request.method)
