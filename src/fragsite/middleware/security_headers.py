"""Response finalizer — the fixed security header set.

Applied to every response the site produces: wrapped pages, asset
passthrough, 404s, and 500s. The set is not configurable.

- Content-Security-Policy — scripts, styles, and fonts from self plus the
  Bootstrap CDN; no embedding
- X-Frame-Options — prevents clickjacking
- Referrer-Policy — no referrer leakage
- X-Content-Type-Options — prevents MIME sniffing
- Permissions-Policy — geolocation, microphone, and camera disabled
- Strict-Transport-Security — 180 days, subdomains included
"""

from fragsite.http.response import Response
from fragsite.rendering.shell import BOOTSTRAP_CDN

CONTENT_SECURITY_POLICY = "; ".join(
    (
        "default-src 'self'",
        f"script-src 'self' {BOOTSTRAP_CDN}",
        f"style-src 'self' 'unsafe-inline' {BOOTSTRAP_CDN}",
        "img-src 'self' https: data:",
        f"font-src 'self' {BOOTSTRAP_CDN}",
        "connect-src 'self'",
        "object-src 'none'",
        "base-uri 'self'",
        "frame-ancestors 'none'",
        "upgrade-insecure-requests",
    )
)

SECURITY_HEADERS: tuple[tuple[str, str], ...] = (
    ("Content-Security-Policy", CONTENT_SECURITY_POLICY),
    ("Referrer-Policy", "no-referrer"),
    ("X-Content-Type-Options", "nosniff"),
    ("X-Frame-Options", "DENY"),
    ("Permissions-Policy", "geolocation=(), microphone=(), camera=()"),
    ("Strict-Transport-Security", "max-age=15552000; includeSubDomains; preload"),
)


def finalize(response: Response) -> Response:
    """Overlay ``SECURITY_HEADERS`` on *response*.

    Headers of the same name are replaced. Status and body are untouched.
    """
    for name, value in SECURITY_HEADERS:
        response = response.with_header_set(name, value)
    return response
