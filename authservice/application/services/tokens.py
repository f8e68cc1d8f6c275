# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed bearer tokens (HS256 JWT)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from authservice.domain.users.entities import Identity
from authservice.domain.users.exceptions import InvalidTokenError


class JwtTokenService:
    def __init__(
        self,
        *,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        if not secret:
            raise ValueError("jwt_secret_blank")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock

    def issue(self, identity: Identity) -> str:
        now = self._clock()
        payload: dict[str, Any] = {
            "sub": str(identity.user_id),
            "name": identity.name,
            "email": identity.email,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Identity:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError(context={"reason": type(exc).__name__}) from exc

        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError) as exc:
            raise InvalidTokenError(context={"reason": "sub_not_int"}) from exc

        return Identity(
            user_id=user_id,
            name=str(payload.get("name") or ""),
            email=str(payload.get("email") or ""),
        )


__all__ = ["JwtTokenService"]
