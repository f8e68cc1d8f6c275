# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authservice.domain.users.entities import Identity
from authservice.domain.users.exceptions import (InvalidCredentialsError,
                                                 InvalidPasswordError,
                                                 UserNotFoundError)
from authservice.domain.users.repositories import (Authenticator,
                                                   PasswordHasher,
                                                   UserRepository)


class LoginUserUseCase:
    """Verify an e-mail/password pair and establish a credential.

    With ``uniform_errors`` an unknown e-mail and a wrong password both raise
    ``InvalidCredentialsError``; otherwise they stay distinguishable (404 vs
    401). Either way an unknown e-mail still pays for one hash verification.
    """

    _DUMMY_PASSWORD = "not-a-real-password"

    def __init__(
        self,
        *,
        users: UserRepository,
        authenticator: Authenticator,
        password_hasher: PasswordHasher,
        uniform_errors: bool = False,
    ) -> None:
        self._users = users
        self._authenticator = authenticator
        self._password_hasher = password_hasher
        self._uniform_errors = uniform_errors
        self._dummy_hash = password_hasher.hash(self._DUMMY_PASSWORD)

    def _equalize_timing(self, password: str) -> None:
        self._password_hasher.verify(password, self._dummy_hash)

    def execute(self, email: str, password: str) -> tuple[Identity, str]:
        user = self._users.find_by_email(email)
        if user is None:
            self._equalize_timing(password)
            if self._uniform_errors:
                raise InvalidCredentialsError()
            raise UserNotFoundError()

        if not self._password_hasher.verify(password, user.password_hash):
            if self._uniform_errors:
                raise InvalidCredentialsError()
            raise InvalidPasswordError()

        identity = user.identity()
        credential = self._authenticator.establish(identity)
        return identity, credential
