from __future__ import annotations

from flask import current_app, request
from werkzeug.wrappers.response import Response


def apply_security_headers(response: Response) -> Response:
    # HSTS (only meaningful over HTTPS)
    hsts_seconds = current_app.config.get("SECURITY_HSTS_SECONDS", 31536000)
    response.headers.setdefault("Strict-Transport-Security", f"max-age={hsts_seconds}; includeSubDomains")

    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")

    permissions_policy = current_app.config.get(
        "SECURITY_PERMISSIONS_POLICY", "geolocation=(), microphone=(), camera=()"
    )
    response.headers.setdefault("Permissions-Policy", permissions_policy)

    # Stream pages and "more" checks depend on per-session paging state
    if request.path.startswith("/json/"):
        response.headers.setdefault("Cache-Control", "no-store, private")

    csp = current_app.config.get("SECURITY_CSP")
    if csp:
        response.headers.setdefault("Content-Security-Policy", csp)

    return response
