"""Unit tests for IssuedTokenRepository."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from blog_api.models import IssuedToken
from blog_api.repositories.issued_token import IssuedTokenRepository


@pytest.fixture()
def repo(session):
    return IssuedTokenRepository(session=session)


def _add(repo, jti, exp):
    repo.add(IssuedToken(jti=jti, exp=exp))
    repo.session.commit()


def test_exists_and_delete_by_jti(repo):
    _add(repo, "abc", datetime.now(UTC) + timedelta(hours=1))
    assert repo.exists_jti("abc")

    assert repo.delete_by_jti("abc") == 1
    assert not repo.exists_jti("abc")
    assert repo.delete_by_jti("abc") == 0


def test_delete_expired_keeps_live_rows(repo):
    now = datetime.now(UTC)
    _add(repo, "old", now - timedelta(minutes=1))
    _add(repo, "new", now + timedelta(hours=1))

    assert repo.delete_expired(now) == 1
    assert not repo.exists_jti("old")
    assert repo.exists_jti("new")
