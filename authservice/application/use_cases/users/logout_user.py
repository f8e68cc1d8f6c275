"""Use-case for invalidating a caller's credential."""

from __future__ import annotations

from authservice.domain.users.repositories import Authenticator


class LogoutUserUseCase:
    def __init__(self, *, authenticator: Authenticator) -> None:
        self._authenticator = authenticator

    def execute(self, credential: str | None) -> None:
        self._authenticator.revoke(credential)
