"""
blog_api.services._shared.ports
===============================

Collection of *ports* (hexagonal interfaces) that define the contracts for
token management.

Modules
-------
- :mod:`token_provider`:
    Defines :class:`~.TokenProvider`, the abstraction for JWT creation and decoding.

- :mod:`token_store`:
    Defines :class:`~.IssuedTokenStore`, the server-side record of live tokens.

Concrete adapters (flask-jwt-extended, SQL tables) implement these interfaces
under ``blog_api.infra``.
"""

from __future__ import annotations

from .token_provider import StubTokenProvider, TokenProvider
from .token_store import InMemoryIssuedTokenStore, IssuedTokenStore

__all__ = [
    "TokenProvider",
    "IssuedTokenStore",
    "InMemoryIssuedTokenStore",
    "StubTokenProvider",
]
