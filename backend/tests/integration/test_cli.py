"""
Integration tests for the ``flask seed`` and ``flask tokens`` commands.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from blog_api.models import Article, Comment, IssuedToken, User
from blog_api.seeds.seed_data import ARTICLE_FIXTURES, USER_FIXTURES
from tests.helpers.utils import count


def test_seed_run_is_idempotent(app):
    runner = app.test_cli_runner()

    first = runner.invoke(args=["seed", "run"])
    assert first.exit_code == 0, first.output
    assert "Seed summary:" in first.output
    assert count(User) == len(USER_FIXTURES)
    assert count(Article) == len(ARTICLE_FIXTURES)

    second = runner.invoke(args=["seed", "run"])
    assert second.exit_code == 0, second.output
    assert count(User) == len(USER_FIXTURES)
    assert count(Comment) == sum(len(a["comments"]) for a in ARTICLE_FIXTURES)


def test_seeded_user_can_sign_in(app, client):
    app.test_cli_runner().invoke(args=["seed", "run"])
    fixture = USER_FIXTURES[0]
    resp = client.post("/api/v1/auth/sign_in", json=fixture)
    assert resp.status_code == 200


def test_tokens_purge(app, session):
    now = datetime.now(UTC)
    session.add_all(
        [
            IssuedToken(jti="expired", exp=now - timedelta(hours=1)),
            IssuedToken(jti="live", exp=now + timedelta(hours=1)),
        ]
    )
    session.commit()

    result = app.test_cli_runner().invoke(args=["tokens", "purge"])

    assert result.exit_code == 0, result.output
    assert "Purged 1 expired token(s)." in result.output
    assert count(IssuedToken) == 1
