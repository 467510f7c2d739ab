from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any, Protocol


class TokenProvider(Protocol):
    """Port for issuing and decoding signed access tokens.

    ``decode`` raises :class:`~blog_api.services._shared.errors.AuthenticationError`
    when the signature or expiry check fails.
    """

    def create_access_token(
        self,
        *,
        identity: int | str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
        jti: str | None = None,
    ) -> str: ...

    def decode(self, token: str) -> dict[str, Any]: ...

    def get_jti(self, token: str) -> str | None: ...

    def get_expires_at(self, token: str) -> datetime: ...


class StubTokenProvider(TokenProvider):
    """Deterministic token provider used in unit tests."""

    def __init__(self) -> None:
        self._now = datetime.now(tz=UTC)
        self._seq = 0
        self._issued: dict[str, dict[str, Any]] = {}

    def create_access_token(
        self,
        *,
        identity: int | str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
        jti: str | None = None,
    ) -> str:
        self._seq += 1
        jti_value = jti or f"jti-{self._seq}"
        token = f"access.{identity}.{jti_value}.{self._seq}"
        payload: dict[str, Any] = {
            "sub": identity,
            "type": "access",
            "jti": jti_value,
            "exp": int((self._now + (expires_delta or timedelta(hours=24))).timestamp()),
        }
        if additional_claims:
            payload.update(additional_claims)
        self._issued[token] = payload
        return token

    def forge(self, payload: dict[str, Any]) -> str:
        """Register an arbitrary payload, e.g. one without a ``jti``."""
        self._seq += 1
        token = f"forged.{self._seq}"
        self._issued[token] = dict(payload)
        return token

    def decode(self, token: str) -> dict[str, Any]:
        from blog_api.services._shared.errors import AuthenticationError

        try:
            return self._issued[token]
        except KeyError:
            raise AuthenticationError("Invalid token") from None

    def get_jti(self, token: str) -> str | None:
        jti = self.decode(token).get("jti")
        return str(jti) if jti else None

    def get_expires_at(self, token: str) -> datetime:
        exp = int(self.decode(token)["exp"])
        return datetime.fromtimestamp(exp, tz=UTC)
