"""Database-backed :class:`IssuedTokenStore` over the ``jwt_denylists`` table."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from blog_api.models.issued_token import IssuedToken
from blog_api.services._shared.base import SessionProvider, flask_session
from blog_api.services._shared.ports import IssuedTokenStore
from blog_api.uow.sqlalchemy_uow import SQLAlchemyUnitOfWork

log = logging.getLogger(__name__)


class SQLIssuedTokenStore(IssuedTokenStore):
    """
    Each write commits in its own unit of work so a token becomes live (or
    revoked) as soon as the call returns.
    """

    def __init__(self, session_provider: SessionProvider | None = None) -> None:
        self.session_provider = session_provider or flask_session

    def _uow(self) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session=self.session_provider())

    def register(self, *, jti: str, expires_at: datetime) -> None:
        with self._uow() as uow:
            uow.issued_tokens.add(IssuedToken(jti=jti, exp=expires_at))

    def is_live(self, jti: str) -> bool:
        # Plain read on the request session; no commit needed.
        return self._uow().issued_tokens.exists_jti(jti)

    def revoke(self, jti: str) -> bool:
        with self._uow() as uow:
            removed = uow.issued_tokens.delete_by_jti(jti)
        return removed > 0

    def purge_expired(self, now: datetime | None = None) -> int:
        cutoff = now or datetime.now(UTC)
        with self._uow() as uow:
            removed = uow.issued_tokens.delete_expired(cutoff)
        log.info("tokens.purged count=%s", removed)
        return removed
