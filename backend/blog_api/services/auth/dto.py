# blog_api/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class RegisterIn:
    """
    Input DTO for registration.

    :param email: User email (normalized by the model).
    :type email: str
    :param password: Raw password (hashed before storage).
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param email: User email.
    :type email: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class LogoutIn:
    """
    Input DTO for logout.

    :param token: Encoded bearer JWT, or ``None`` when the header was absent.
    :type token: str | None
    """

    token: str | None


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class UserOut:
    """Public view of a user."""

    id: int
    email: str


@dataclass(frozen=True, slots=True)
class LoginOut:
    """
    Output DTO for a successful sign-in.

    :param token: Encoded access JWT.
    :type token: str
    :param user: Authenticated user.
    :type user: UserOut
    """

    token: str
    user: UserOut


@dataclass(frozen=True, slots=True)
class CurrentIdentity:
    """Verified claims of the bearer token attached to the current request."""

    user_id: int
    email: str | None
    jti: str


# ------------------------ Config DTO ------------------------------------- #


@dataclass(frozen=True, slots=True)
class AuthTokenConfig:
    """
    Token emission configuration.

    :param access_expires: Access token lifetime.
    :type access_expires: timedelta
    """

    access_expires: timedelta = timedelta(hours=24)
