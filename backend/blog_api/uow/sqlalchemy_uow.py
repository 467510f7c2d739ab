"""
SQLAlchemy implementation of UnitOfWork for Flask.
"""

from __future__ import annotations

import logging
from contextlib import suppress

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blog_api.repositories import (
    ArticleRepository,
    CommentRepository,
    ImageRepository,
    IssuedTokenRepository,
    LikeRepository,
    UserRepository,
)
from blog_api.uow.base import UnitOfWork

log = logging.getLogger(__name__)

# Dialects that understand ``SET TRANSACTION ...`` as the first statement.
_SET_TRANSACTION_DIALECTS = ("postgresql", "mysql", "mariadb")


class SQLAlchemyRepositoryContainer:
    """Provide repository instances that share a SQLAlchemy session."""

    def __init__(self, *, session: Session) -> None:
        self.session = session
        self.users = UserRepository(session=self.session)
        self.issued_tokens = IssuedTokenRepository(session=self.session)
        self.articles = ArticleRepository(session=self.session)
        self.images = ImageRepository(session=self.session)
        self.comments = CommentRepository(session=self.session)
        self.likes = LikeRepository(session=self.session)


class SQLAlchemyUnitOfWork(SQLAlchemyRepositoryContainer, UnitOfWork):
    """
    SQLAlchemy-backed UoW over the session handed in by the service.

    The same session is shared across all repositories for a consistent transaction.
    """

    def __enter__(self) -> SQLAlchemyUnitOfWork:
        # No-op: the session is lazily started on the first statement.
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            try:
                self.commit()
            except Exception:
                self.rollback()
                raise
        else:
            self.rollback()

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


class SQLAlchemyReadOnlyUnitOfWork(SQLAlchemyRepositoryContainer, UnitOfWork):
    """
    Read-only Unit of Work.

    This UoW:
    - Requests the configured isolation level when the session has not started
      a transaction yet and the dialect supports ``SET TRANSACTION``.
    - Blocks ORM flushes carrying pending changes.
    - Always rolls back on exit; ``commit()`` is disallowed.

    *SQLite*: no isolation directive is sent; the flush guard still applies.
    """

    def __init__(
        self,
        *,
        session: Session,
        isolation_level: str | None = "READ COMMITTED",
    ) -> None:
        super().__init__(session=session)
        self.isolation_level = isolation_level
        self._guard_installed = False

    # ----------------------------- Context Manager -----------------------------

    def __enter__(self) -> SQLAlchemyReadOnlyUnitOfWork:
        fresh = not self.session.in_transaction()
        dialect = self.session.get_bind().dialect.name
        if fresh and self.isolation_level and dialect in _SET_TRANSACTION_DIALECTS:
            iso = self.isolation_level.upper().strip()
            try:
                self.session.execute(text(f"SET TRANSACTION ISOLATION LEVEL {iso}"))
            except SQLAlchemyError as exc:
                log.warning("SET TRANSACTION failed (%s); using the connection default.", exc)
        event.listen(self.session, "before_flush", self._block_flush)
        self._guard_installed = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.session.rollback()
        finally:
            if self._guard_installed:
                with suppress(Exception):
                    event.remove(self.session, "before_flush", self._block_flush)
                self._guard_installed = False

    # ----------------------------- Public API ---------------------------------

    def commit(self) -> None:
        """
        Disallow commit in read-only Unit of Work.

        :raises RuntimeError: always, to prevent accidental writes.
        """
        raise RuntimeError("Read-only UnitOfWork does not allow commit().")

    def rollback(self) -> None:
        self.session.rollback()

    # ----------------------------- Guards --------------------------------------

    @staticmethod
    def _block_flush(session, flush_context, instances) -> None:
        if session.new or session.dirty or session.deleted:
            raise RuntimeError(
                "Read-only UnitOfWork: ORM flush blocked (new/dirty/deleted objects present)."
            )
