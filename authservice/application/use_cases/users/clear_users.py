# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authservice.domain.users.exceptions import ClearDisabledError
from authservice.domain.users.repositories import SessionStore, UserRepository
from authservice.shared.logging import logger


class ClearUsersUseCase:
    """Delete every user, then every stored session."""

    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionStore,
        enabled: bool = True,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._enabled = enabled

    def execute(self, requested_by: int) -> int:
        if not self._enabled:
            raise ClearDisabledError(context={"requested_by": requested_by})
        deleted = self._users.delete_all()
        revoked = self._sessions.clear()
        logger.warning(
            f"users.clear: user={requested_by} deleted {deleted} users, revoked {revoked} sessions"
        )
        return deleted


__all__ = ["ClearUsersUseCase"]
