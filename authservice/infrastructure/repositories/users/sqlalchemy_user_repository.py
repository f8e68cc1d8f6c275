# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from authservice.domain.users.entities import User as DomainUser
from authservice.domain.users.exceptions import UserAlreadyExistsError
from authservice.domain.users.repositories import UserRepository
from authservice.infrastructure.db.models import User
from authservice.infrastructure.db.session import session_scope
from authservice.shared.errors.base import StoreUnavailableError
from authservice.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    created_at = row.created_at or datetime.now(UTC)
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return DomainUser(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
        created_at=created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_email(self, email: str) -> DomainUser | None:
        try:
            with session_scope() as session:
                row = session.scalars(select(User).where(User.email == email)).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            raise StoreUnavailableError("users.find_by_email") from exc

    def find_by_name_or_email(self, name: str, email: str) -> DomainUser | None:
        try:
            with session_scope() as session:
                row = session.scalars(
                    select(User).where(or_(User.name == name, User.email == email))
                ).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            raise StoreUnavailableError("users.find_by_name_or_email") from exc

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope() as session:
                row = User(
                    name=user.name,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            # Lost a race against a concurrent registration of the same name/email.
            logger.info("users.add: unique constraint rejected duplicate user")
            raise UserAlreadyExistsError() from exc
        except SQLAlchemyError as exc:
            raise StoreUnavailableError("users.add") from exc

    def list_all(self) -> Sequence[DomainUser]:
        try:
            with session_scope() as session:
                rows = session.scalars(select(User).order_by(User.id.asc())).all()
                return [_to_domain(row) for row in rows]
        except SQLAlchemyError as exc:
            raise StoreUnavailableError("users.list_all") from exc

    def delete_all(self) -> int:
        try:
            with session_scope() as session:
                result = session.execute(delete(User))
                return int(result.rowcount or 0)
        except SQLAlchemyError as exc:
            raise StoreUnavailableError("users.delete_all") from exc
