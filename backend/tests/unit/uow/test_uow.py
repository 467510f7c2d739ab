"""
Unit tests for the SQLAlchemy units of work, using factories.
"""

from __future__ import annotations

import pytest

from blog_api.models import User
from blog_api.uow import SQLAlchemyReadOnlyUnitOfWork, SQLAlchemyUnitOfWork
from tests.factories.user import UserFactory
from tests.helpers.utils import count


class TestSQLAlchemyUnitOfWorkWriter:
    def test_writer_uow_commits_on_success(self, session):
        """
        GIVEN a writer UoW
        WHEN a user is added inside the context and it exits cleanly
        THEN the row is committed.
        """
        initial = count(User)

        with SQLAlchemyUnitOfWork(session=session()) as uow:
            uow.users.add(User(email="writer@example.com", encrypted_password="x"))

        session.rollback()  # would discard anything left uncommitted
        assert count(User) == initial + 1

    def test_writer_uow_rolls_back_on_exception(self, session):
        initial = count(User)

        with pytest.raises(RuntimeError), SQLAlchemyUnitOfWork(session=session()) as uow:
            uow.users.add(User(email="boom@example.com", encrypted_password="x"))
            raise RuntimeError("boom")

        assert count(User) == initial


class TestSQLAlchemyReadOnlyUnitOfWork:
    def test_reads_are_allowed(self, session):
        u = UserFactory(email="reader@example.com")
        with SQLAlchemyReadOnlyUnitOfWork(session=session()) as uow:
            assert uow.users.get_by_email("reader@example.com").id == u.id

    def test_flush_with_changes_is_blocked(self, session):
        with pytest.raises(RuntimeError), SQLAlchemyReadOnlyUnitOfWork(session=session()) as uow:
            uow.users.add(User(email="sneaky@example.com", encrypted_password="x"))
        assert count(User) == 0

    def test_commit_is_disallowed(self, session):
        with SQLAlchemyReadOnlyUnitOfWork(session=session()) as uow, pytest.raises(RuntimeError):
            uow.commit()

    def test_guard_is_removed_on_exit(self, session):
        with SQLAlchemyReadOnlyUnitOfWork(session=session()):
            pass
        with SQLAlchemyUnitOfWork(session=session()) as uow:
            uow.users.add(User(email="after@example.com", encrypted_password="x"))
        assert count(User) == 1
