# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from authservice.domain.users.entities import Identity, Session
from authservice.domain.users.repositories import SessionStore
from authservice.infrastructure.db.models import SessionRecord
from authservice.infrastructure.db.session import session_scope
from authservice.shared.errors.base import StoreUnavailableError


def _aware(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC.
    return value if value.tzinfo else value.replace(tzinfo=UTC)


class SqlAlchemySessionStore(SessionStore):
    def __init__(
        self,
        *,
        lifetime: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._lifetime = lifetime
        self._clock = clock

    def create(self, identity: Identity) -> Session:
        token_value = secrets.token_urlsafe(48)
        expires_at = self._clock() + self._lifetime
        try:
            with session_scope() as session:
                session.execute(
                    delete(SessionRecord).where(SessionRecord.user_id == identity.user_id)
                )
                session.add(
                    SessionRecord(
                        session_id=token_value,
                        user_id=identity.user_id,
                        name=identity.name,
                        email=identity.email,
                        expires_at=expires_at,
                    )
                )
        except SQLAlchemyError as exc:
            raise StoreUnavailableError("sessions.create") from exc
        return Session(session_id=token_value, identity=identity, expires_at=expires_at)

    def get(self, session_id: str) -> Session | None:
        try:
            with session_scope() as session:
                row = session.scalars(
                    select(SessionRecord).where(SessionRecord.session_id == session_id)
                ).first()
                if row is None:
                    return None
                expires_at = _aware(row.expires_at)
                if self._clock() >= expires_at:
                    session.delete(row)
                    return None
                return Session(
                    session_id=row.session_id,
                    identity=Identity(user_id=row.user_id, name=row.name, email=row.email),
                    expires_at=expires_at,
                )
        except SQLAlchemyError as exc:
            raise StoreUnavailableError("sessions.get") from exc

    def revoke(self, session_id: str) -> None:
        try:
            with session_scope() as session:
                session.execute(delete(SessionRecord).where(SessionRecord.session_id == session_id))
        except SQLAlchemyError as exc:
            raise StoreUnavailableError("sessions.revoke") from exc

    def clear(self) -> int:
        try:
            with session_scope() as session:
                result = session.execute(delete(SessionRecord))
                return int(result.rowcount or 0)
        except SQLAlchemyError as exc:
            raise StoreUnavailableError("sessions.clear") from exc


__all__ = ["SqlAlchemySessionStore"]
