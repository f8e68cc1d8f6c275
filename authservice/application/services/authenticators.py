# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""The two ways a caller can prove who they are.

``SessionAuthenticator`` is the canonical mechanism: an opaque session id
pointing at server-side state. ``TokenAuthenticator`` is the legacy
stateless bearer-token mode kept for older clients; it never touches the
session store and cannot revoke what it issued.
"""

from __future__ import annotations

from authservice.domain.users.entities import Identity
from authservice.domain.users.exceptions import (NotAuthenticatedError,
                                                 TokenNotProvidedError)
from authservice.domain.users.repositories import Authenticator, SessionStore
from authservice.shared.logging import logger

from .tokens import JwtTokenService


class SessionAuthenticator(Authenticator):
    def __init__(self, *, sessions: SessionStore) -> None:
        self._sessions = sessions

    def establish(self, identity: Identity) -> str:
        session = self._sessions.create(identity)
        logger.debug(f"auth.session: created for user={identity.user_id}")
        return session.session_id

    def resolve(self, credential: str | None) -> Identity:
        if not credential:
            raise NotAuthenticatedError()
        session = self._sessions.get(credential)
        if session is None:
            raise NotAuthenticatedError()
        return session.identity

    def revoke(self, credential: str | None) -> None:
        if credential:
            self._sessions.revoke(credential)


class TokenAuthenticator(Authenticator):
    def __init__(self, *, tokens: JwtTokenService) -> None:
        self._tokens = tokens

    def establish(self, identity: Identity) -> str:
        return self._tokens.issue(identity)

    def resolve(self, credential: str | None) -> Identity:
        if not credential:
            raise TokenNotProvidedError()
        return self._tokens.verify(credential)

    def revoke(self, credential: str | None) -> None:
        # Stateless: the token stays valid until it expires.
        return None


__all__ = ["SessionAuthenticator", "TokenAuthenticator"]
