# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
import threading
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from authservice.domain.users.entities import Identity, Session
from authservice.domain.users.repositories import SessionStore


class InMemorySessionStore(SessionStore):
    """Process-local session map.

    A user holds at most one live session: ``create`` drops the user's
    previous one. Expired entries are removed when they are read.
    """

    def __init__(
        self,
        *,
        lifetime: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._lifetime = lifetime
        self._clock = clock
        self._sessions: dict[str, Session] = {}
        self._lock = threading.RLock()

    def create(self, identity: Identity) -> Session:
        session = Session(
            session_id=secrets.token_urlsafe(48),
            identity=identity,
            expires_at=self._clock() + self._lifetime,
        )
        with self._lock:
            for sid, existing in list(self._sessions.items()):
                if existing.identity.user_id == identity.user_id:
                    del self._sessions[sid]
            self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> Session | None:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            if session.is_expired(self._clock()):
                del self._sessions[session_id]
                return None
            return session

    def revoke(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def clear(self) -> int:
        with self._lock:
            count = len(self._sessions)
            self._sessions.clear()
            return count


__all__ = ["InMemorySessionStore"]
