# blog_api/infra/jwt/flask_jwt_token_provider.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, cast

from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import ExpiredSignatureError, PyJWTError

from blog_api.services._shared.errors import AuthenticationError
from blog_api.services._shared.ports import TokenProvider


@dataclass(slots=True)
class JWTTokenProvider(TokenProvider):
    """
    Adapter for Flask-JWT-Extended.

    .. note::
       Requires an active Flask app context with proper JWT settings.
    """

    def create_access_token(
        self,
        *,
        identity: str | int,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
        jti: str | None = None,
    ) -> str:
        # Claim overrides are applied after the library's own jti, so ours wins.
        from flask_jwt_extended import create_access_token as _create_access

        claims = dict(additional_claims or {})
        if jti is not None:
            claims["jti"] = jti

        token = cast(
            str,
            _create_access(
                identity=str(identity),
                additional_claims=claims,
                expires_delta=expires_delta,
            ),
        )

        if jti is not None and self.get_jti(token) != jti:
            # The stored row and the signed token must agree on the jti.
            raise RuntimeError("Access token jti mismatch after creation.")

        return token

    def decode(self, token: str) -> dict[str, Any]:
        """Verify signature and expiry; the revocation check is not applied here."""
        from flask_jwt_extended import decode_token

        try:
            return cast(dict[str, Any], decode_token(token))
        except ExpiredSignatureError as exc:
            raise AuthenticationError("Token has expired") from exc
        except (PyJWTError, JWTExtendedException) as exc:
            raise AuthenticationError("Invalid token") from exc

    def get_jti(self, token: str) -> str | None:
        jti = self.decode(token).get("jti")
        return str(jti) if jti else None

    def get_expires_at(self, token: str) -> datetime:
        exp = int(self.decode(token)["exp"])
        return datetime.fromtimestamp(exp, tz=UTC)
