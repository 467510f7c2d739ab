"""Repository for the issued-token table (``jwt_denylists``)."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete, select

from blog_api.models.issued_token import IssuedToken
from blog_api.repositories.base import BaseRepository


class IssuedTokenRepository(BaseRepository[IssuedToken]):
    """Persistence for token identifiers. A row means the token is still live."""

    model = IssuedToken

    def exists_jti(self, jti: str) -> bool:
        stmt = select(IssuedToken.id).where(IssuedToken.jti == jti)
        return self.session.execute(stmt).first() is not None

    def delete_by_jti(self, jti: str) -> int:
        """Delete the row for ``jti``; returns the number of rows removed."""
        result = self.session.execute(delete(IssuedToken).where(IssuedToken.jti == jti))
        return int(result.rowcount or 0)

    def delete_expired(self, now: datetime) -> int:
        """Delete rows whose ``exp`` is at or before ``now``."""
        result = self.session.execute(delete(IssuedToken).where(IssuedToken.exp <= now))
        return int(result.rowcount or 0)
