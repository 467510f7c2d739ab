"""Trust ``X-Forwarded-*`` headers from a reverse proxy."""

from __future__ import annotations

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix


def init_app(app: Flask) -> None:
    """Wrap the WSGI app in :class:`ProxyFix` when ``PROXYFIX_HOPS`` > 0.

    The sign-in rate limit keys on the client address, so behind a proxy the
    forwarded address must be trusted for the limit to apply per client.
    """
    hops = int(app.config.get("PROXYFIX_HOPS", 0))
    if hops > 0:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=hops, x_proto=hops, x_host=hops)
