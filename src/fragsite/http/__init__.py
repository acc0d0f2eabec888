"""HTTP primitives: immutable request and response."""

from fragsite.http.request import Request
from fragsite.http.response import Response

__all__ = ["Request", "Response"]
