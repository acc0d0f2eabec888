"""Test utilities for fragsite sites.

    from fragsite.testing import TestClient
"""

from fragsite.testing.client import TestClient

__all__ = ["TestClient"]
