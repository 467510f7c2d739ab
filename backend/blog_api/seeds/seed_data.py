"""Idempotent database seed helpers for local development environments."""

from __future__ import annotations

import logging
from typing import Any, TypeVar, cast

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import select
from sqlalchemy.orm import Session

from blog_api.models.article import Article, Image
from blog_api.models.comment import Comment
from blog_api.models.like import Like, LikeableType
from blog_api.models.user import User

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

# 1x1 transparent PNG.
PIXEL_PNG = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)

USER_FIXTURES: list[dict[str, str]] = [
    {"email": "editor@example.com", "password": "editorPass123"},
    {"email": "reader@example.com", "password": "readerPass123"},
]

ARTICLE_FIXTURES: list[dict[str, Any]] = [
    {
        "title": "Welcome to the blog",
        "short_description": "What this blog is about.",
        "description": "Notes on building small, well-tested web services.",
        "image": PIXEL_PNG,
        "image_alt": "Blank placeholder",
        "comments": ["Looking forward to more posts!", "Nice start."],
        "likes": 3,
        "dislikes": 0,
    },
    {
        "title": "Designing token revocation",
        "short_description": "Keeping a table of live sessions.",
        "description": "Each sign-in records a token id; signing out deletes it.",
        "image": None,
        "image_alt": None,
        "comments": ["Why not a denylist?"],
        "likes": 1,
        "dislikes": 1,
    },
    {
        "title": "Images as base64",
        "short_description": "Trade-offs of storing pictures inline.",
        "description": "Inline payloads keep the schema simple at the cost of row size.",
        "image": PIXEL_PNG,
        "image_alt": "Another placeholder",
        "comments": [],
        "likes": 0,
        "dislikes": 2,
    },
]


def _session(database: SQLAlchemy) -> Session:
    """Return the current SQLAlchemy session."""
    return cast(Session, database.session)


def _touch(summary: dict[str, dict[str, int]], table: str, created: bool) -> None:
    """Update summary counters for the given table."""
    entry = summary.setdefault(table, {"created": 0, "existing": 0})
    if created:
        entry["created"] += 1
    else:
        entry["existing"] += 1


def _get_or_create(
    session: Session,
    model: type[T],
    *,
    defaults: dict[str, Any] | None = None,
    **filters: Any,
) -> tuple[T, bool]:
    """Fetch ``model`` by ``filters`` or create it using ``defaults``."""
    instance = session.execute(select(model).filter_by(**filters)).scalars().first()
    if instance is not None:
        return cast(T, instance), False
    params = dict(defaults or {})
    params.update(filters)
    instance = model(**params)
    session.add(instance)
    session.flush()
    return cast(T, instance), True


def seed_users(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Create demo accounts able to sign in."""
    if verbose:
        LOGGER.info("Seeding users...")
    session = _session(database)
    summary: dict[str, dict[str, int]] = {}
    for fixture in USER_FIXTURES:
        email = fixture["email"].strip().lower()
        user = session.execute(select(User).filter_by(email=email)).scalars().first()
        created = user is None
        if user is None:
            user = User(email=email)
            user.password = fixture["password"]
            session.add(user)
        _touch(summary, User.__tablename__, created)
    session.commit()
    return summary


def seed_articles(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Create articles with optional images, their comments and counters."""
    if verbose:
        LOGGER.info("Seeding articles, comments and likes...")
    session = _session(database)
    summary: dict[str, dict[str, int]] = {}
    for fixture in ARTICLE_FIXTURES:
        article = session.execute(
            select(Article).filter_by(title=fixture["title"])
        ).scalars().first()
        created = article is None
        if article is None:
            image_id = None
            if fixture["image"] is not None:
                image = Image(image=fixture["image"], image_alt=fixture["image_alt"])
                session.add(image)
                session.flush()
                image_id = image.id
                _touch(summary, Image.__tablename__, True)
            article = Article(
                title=fixture["title"],
                short_description=fixture["short_description"],
                description=fixture["description"],
                image_id=image_id,
            )
            session.add(article)
            session.flush()
        _touch(summary, Article.__tablename__, created)

        for content in fixture["comments"]:
            _, made = _get_or_create(session, Comment, article_id=article.id, content=content)
            _touch(summary, Comment.__tablename__, made)

        _, made = _get_or_create(
            session,
            Like,
            defaults={"likes": fixture["likes"], "dislikes": fixture["dislikes"]},
            likeable_type=LikeableType.ARTICLE.value,
            likeable_id=article.id,
        )
        _touch(summary, Like.__tablename__, made)
    session.commit()
    return summary


def run_all(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Run all seeders in foreign-key order."""
    if verbose:
        LOGGER.info("Running full seed pipeline...")
    combined: dict[str, dict[str, int]] = {}
    for func in (seed_users, seed_articles):
        result = func(database, verbose=verbose)
        for table, counters in result.items():
            entry = combined.setdefault(table, {"created": 0, "existing": 0})
            entry["created"] += counters.get("created", 0)
            entry["existing"] += counters.get("existing", 0)
    return combined


__all__ = ["seed_articles", "seed_users", "run_all"]
