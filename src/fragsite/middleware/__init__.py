"""Middleware protocol and the response finalizer."""

from fragsite.middleware.protocol import Middleware, Next
from fragsite.middleware.security_headers import SECURITY_HEADERS, finalize

__all__ = ["SECURITY_HEADERS", "Middleware", "Next", "finalize"]
