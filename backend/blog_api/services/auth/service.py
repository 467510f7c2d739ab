# blog_api/services/auth/service.py
from __future__ import annotations

import logging
from typing import Any
from uuid import uuid4

from sqlalchemy.exc import IntegrityError

from blog_api.models.user import User
from blog_api.services._shared.base import BaseService, SessionProvider
from blog_api.services._shared.errors import (
    AuthenticationError,
    ConflictError,
    ValidationError,
    violates,
)
from blog_api.services._shared.ports import IssuedTokenStore, TokenProvider
from blog_api.services.auth.dto import (
    AuthTokenConfig,
    CurrentIdentity,
    LoginIn,
    LoginOut,
    LogoutIn,
    RegisterIn,
    UserOut,
)

log = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService(BaseService):
    """
    Account and session lifecycle (register / login / logout / whoami).

    Tokens are issued through a pluggable :class:`TokenProvider`; every issued
    ``jti`` is recorded in an :class:`IssuedTokenStore`, and removing it there
    is what revokes the token.
    """

    def __init__(
        self,
        *,
        token_provider: TokenProvider,
        token_store: IssuedTokenStore,
        token_cfg: AuthTokenConfig | None = None,
        session_provider: SessionProvider | None = None,
    ) -> None:
        """
        :param token_provider: Adapter for issuing/decoding JWTs.
        :param token_store: Record of live token identifiers.
        :param token_cfg: Access token expiry configuration.
        :param session_provider: Session source for units of work.
        """
        super().__init__(session_provider=session_provider)
        self.tokens = token_provider
        self.token_store = token_store
        self.cfg = token_cfg or AuthTokenConfig()

    # ------------------------------------------------------------------ #
    # Register
    # ------------------------------------------------------------------ #

    def register(self, dto: RegisterIn) -> UserOut:
        """
        Create an account. No token is issued.

        :raises ConflictError: If the email is already registered.
        :raises ValidationError: If the email or password is unusable.
        """
        try:
            with self.rw_uow() as uow:
                if uow.users.exists_by_email(dto.email):
                    raise ConflictError("User", "User already exists")
                user = User(email=dto.email)
                user.password = dto.password
                uow.users.add(user)
                out = UserOut(id=user.id, email=user.email)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc
        except IntegrityError as exc:
            # Lost a race against a concurrent registration of the same email.
            if violates(exc, "uq_users_email") or violates(exc, "users.email"):
                raise ConflictError("User", "User already exists") from exc
            raise

        log.info("auth.registered user_id=%s", out.id)
        return out

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn) -> LoginOut:
        """
        Authenticate credentials, issue a token and record it as live.

        :raises AuthenticationError: If no user matches or the password is wrong.
        """
        with self.ro_uow() as uow:
            user = uow.users.authenticate(dto.email, dto.password)
            if user is None:
                log.info("auth.login_failed")
                raise AuthenticationError(INVALID_CREDENTIALS)
            user_out = UserOut(id=user.id, email=user.email)

        jti = str(uuid4())
        claims: dict[str, Any] = {"userId": user_out.id, "email": user_out.email}
        token = self.tokens.create_access_token(
            identity=user_out.id,
            additional_claims=claims,
            expires_delta=self.cfg.access_expires,
            jti=jti,
        )
        # The stored expiry is read back from the signed token so both agree.
        self.token_store.register(jti=jti, expires_at=self.tokens.get_expires_at(token))

        log.info("auth.login user_id=%s", user_out.id)
        return LoginOut(token=token, user=user_out)

    # ------------------------------------------------------------------ #
    # Logout
    # ------------------------------------------------------------------ #

    def logout(self, dto: LogoutIn) -> None:
        """
        Revoke the presented token by deleting its ``jti`` record.

        :raises AuthenticationError: If no token was supplied, it fails
            verification, or its ``jti`` is not live.
        """
        if not dto.token:
            raise AuthenticationError("No token provided")

        jti = self.tokens.get_jti(dto.token)
        if not jti or not self.token_store.is_live(jti):
            raise AuthenticationError("Malformed token")

        self.token_store.revoke(jti)
        log.info("auth.logout jti=%s", jti)

    # ------------------------------------------------------------------ #
    # Who am I
    # ------------------------------------------------------------------ #

    def whoami(self, identity: CurrentIdentity) -> UserOut:
        """
        Return the public fields of the authenticated user.

        :raises AuthenticationError: If the account no longer exists.
        """
        with self.ro_uow() as uow:
            user = uow.users.get(identity.user_id)
            if user is None:
                raise AuthenticationError("User no longer exists")
            return UserOut(id=user.id, email=user.email)

    # ------------------------------------------------------------------ #
    # Utilities
    # ------------------------------------------------------------------ #

    @staticmethod
    def identity_from_claims(claims: dict[str, Any]) -> CurrentIdentity:
        """Build a :class:`CurrentIdentity` from verified JWT claims."""
        raw = claims.get("userId", claims.get("sub"))
        if isinstance(raw, int):
            user_id = raw
        elif isinstance(raw, str) and raw.isdigit():
            user_id = int(raw)
        else:
            raise AuthenticationError("Invalid token subject")
        return CurrentIdentity(user_id=user_id, email=claims.get("email"), jti=str(claims["jti"]))
