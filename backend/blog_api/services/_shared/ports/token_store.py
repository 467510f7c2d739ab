from __future__ import annotations

import threading
from datetime import UTC, datetime
from typing import Protocol


class IssuedTokenStore(Protocol):
    """
    Server-side record of **live** access tokens, keyed by ``jti``.

    Presence means the token may still be used; absence means it was revoked
    (or never issued by this server). Methods are expected to be idempotent.
    """

    def register(self, *, jti: str, expires_at: datetime) -> None: ...
    def is_live(self, jti: str) -> bool: ...
    def revoke(self, jti: str) -> bool: ...
    def purge_expired(self, now: datetime | None = None) -> int: ...


class InMemoryIssuedTokenStore(IssuedTokenStore):
    """Dictionary-backed store for unit tests."""

    def __init__(self) -> None:
        self._live: dict[str, datetime] = {}
        self._lock = threading.Lock()

    def register(self, *, jti: str, expires_at: datetime) -> None:
        with self._lock:
            self._live[jti] = expires_at

    def is_live(self, jti: str) -> bool:
        return jti in self._live

    def revoke(self, jti: str) -> bool:
        with self._lock:
            return self._live.pop(jti, None) is not None

    def purge_expired(self, now: datetime | None = None) -> int:
        cutoff = now or datetime.now(UTC)
        with self._lock:
            stale = [j for j, exp in self._live.items() if exp <= cutoff]
            for jti in stale:
                del self._live[jti]
            return len(stale)
