"""
Response hardening: security headers, optional HTTPS redirect and the
XSRF-TOKEN cookie the browser echoes back on state-changing /api calls.
"""

from flask import request, redirect
from flask_wtf.csrf import generate_csrf

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
}


def _is_https():
    proto = request.headers.get("X-Forwarded-Proto", request.scheme)
    return proto.split(",")[0].strip() == "https"


def init_security(app):
    @app.before_request
    def redirect_to_https():
        if app.config.get("FORCE_HTTPS") and not _is_https():
            return redirect(request.url.replace("http://", "https://", 1), code=301)

    @app.after_request
    def set_security_headers(response):
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        if _is_https():
            response.headers.setdefault("Strict-Transport-Security", "max-age=15552000; includeSubDomains")
        return response

    @app.after_request
    def set_csrf_cookie(response):
        if request.path.startswith("/api") and app.config.get("WTF_CSRF_ENABLED", True):
            response.set_cookie(app.config["CSRF_COOKIE_NAME"], generate_csrf(),
                                samesite="Lax", secure=_is_https())
        return response
