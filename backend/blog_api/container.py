"""Service container built once per application.

The factory wires concrete adapters into the services here and stores the
result in ``app.extensions`` so request handlers never construct their own.
"""

from __future__ import annotations

from dataclasses import dataclass

from flask import Flask

from blog_api.services._shared.base import SessionProvider, flask_session
from blog_api.services._shared.ports import IssuedTokenStore, TokenProvider
from blog_api.services.articles.service import ArticleService
from blog_api.services.auth.dto import AuthTokenConfig
from blog_api.services.auth.service import AuthService
from blog_api.services.comments.service import CommentService
from blog_api.services.likes.service import LikeService

EXTENSION_KEY = "blog_api.services"


@dataclass(slots=True)
class Services:
    """Process-wide collaborators shared by every request."""

    token_provider: TokenProvider
    token_store: IssuedTokenStore
    session_provider: SessionProvider
    auth: AuthService
    articles: ArticleService
    comments: CommentService
    likes: LikeService


def build_services(
    app: Flask,
    *,
    token_provider: TokenProvider | None = None,
    token_store: IssuedTokenStore | None = None,
    session_provider: SessionProvider | None = None,
) -> Services:
    """Assemble the container; any collaborator may be overridden (tests)."""
    from blog_api.infra.db.sql_token_store import SQLIssuedTokenStore
    from blog_api.infra.jwt.flask_jwt_token_provider import JWTTokenProvider

    sessions = session_provider or flask_session
    provider = token_provider or JWTTokenProvider()
    store = token_store or SQLIssuedTokenStore(sessions)
    token_cfg = AuthTokenConfig(access_expires=app.config["JWT_ACCESS_TOKEN_EXPIRES"])

    return Services(
        token_provider=provider,
        token_store=store,
        session_provider=sessions,
        auth=AuthService(
            token_provider=provider,
            token_store=store,
            token_cfg=token_cfg,
            session_provider=sessions,
        ),
        articles=ArticleService(session_provider=sessions),
        comments=CommentService(session_provider=sessions),
        likes=LikeService(session_provider=sessions),
    )


def init_app(app: Flask, services: Services | None = None) -> Services:
    """Build (or accept) the container and attach it to ``app``."""
    container = services or build_services(app)
    app.extensions[EXTENSION_KEY] = container
    return container


def get_services(app: Flask) -> Services:
    """Return the container attached by :func:`init_app`."""
    try:
        return app.extensions[EXTENSION_KEY]
    except KeyError:
        raise RuntimeError("Services container is not initialised for this app.") from None
