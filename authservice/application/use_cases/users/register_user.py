# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from authservice.domain.users.entities import User
from authservice.domain.users.exceptions import UserAlreadyExistsError
from authservice.domain.users.repositories import (Authenticator,
                                                   PasswordHasher,
                                                   UserRepository)


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        authenticator: Authenticator,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._authenticator = authenticator
        self._password_hasher = password_hasher

    def execute(self, name: str, email: str, password: str) -> tuple[User, str]:
        existing = self._users.find_by_name_or_email(name, email)
        if existing:
            raise UserAlreadyExistsError()
        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            name=name,
            email=email,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        persisted = self._users.add(user)
        credential = self._authenticator.establish(persisted.identity())
        return persisted, credential
