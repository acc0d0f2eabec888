"""Tests for fragsite.middleware.security_headers — the response finalizer."""

from fragsite.http.response import Response
from fragsite.middleware.security_headers import SECURITY_HEADERS, finalize


class TestFinalize:
    def test_adds_every_header(self) -> None:
        response = finalize(Response("hi"))
        for name, value in SECURITY_HEADERS:
            assert response.header(name) == value

    def test_csp_allows_cdn_and_forbids_framing(self) -> None:
        csp = finalize(Response()).header("Content-Security-Policy")
        assert "script-src 'self' https://cdn.jsdelivr.net" in csp
        assert "font-src 'self' https://cdn.jsdelivr.net" in csp
        assert "frame-ancestors 'none'" in csp

    def test_fixed_values(self) -> None:
        response = finalize(Response())
        assert response.header("X-Frame-Options") == "DENY"
        assert response.header("Referrer-Policy") == "no-referrer"
        assert response.header("X-Content-Type-Options") == "nosniff"
        assert "includeSubDomains" in response.header("Strict-Transport-Security")

    def test_preserves_status_body_and_content_type(self) -> None:
        original = Response(body=b"\x00\x01", status=418, content_type="image/png")
        response = finalize(original)
        assert response.status == 418
        assert response.body == b"\x00\x01"
        assert response.content_type == "image/png"

    def test_overlays_existing_values(self) -> None:
        original = Response().with_header("x-frame-options", "SAMEORIGIN")
        response = finalize(original)
        values = [v for n, v in response.headers if n.lower() == "x-frame-options"]
        assert values == ["DENY"]

    def test_keeps_unrelated_headers(self) -> None:
        response = finalize(Response().with_header("Cache-Control", "no-cache"))
        assert response.header("Cache-Control") == "no-cache"
