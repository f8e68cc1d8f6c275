# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Request-side binding of an ``Authenticator``.

A transport knows where a credential travels (cookie or ``Authorization``
header); the gate combines it with an authenticator and guards views.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, Protocol

from flask import Response, g, request

from authservice.domain.users.entities import Identity
from authservice.domain.users.repositories import Authenticator
from authservice.shared.config.settings import SecurityConfig
from authservice.shared.logging import logger


class CredentialTransport(Protocol):
    def read(self) -> str | None: ...
    def payload_for(self, credential: str) -> dict[str, str]: ...
    def attach(self, response: Response, credential: str) -> None: ...
    def clear(self, response: Response) -> None: ...


class CookieTransport(CredentialTransport):
    def __init__(self, *, cookie_name: str, max_age: int, security: SecurityConfig) -> None:
        self.cookie_name = cookie_name
        self._max_age = max_age
        self._security = security

    def read(self) -> str | None:
        return request.cookies.get(self.cookie_name) or None

    def payload_for(self, credential: str) -> dict[str, str]:
        return {}

    def attach(self, response: Response, credential: str) -> None:
        response.set_cookie(
            self.cookie_name,
            credential,
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
            max_age=self._max_age,
        )

    def clear(self, response: Response) -> None:
        response.delete_cookie(
            self.cookie_name,
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
        )


class BearerTransport(CredentialTransport):
    def read(self) -> str | None:
        header = request.headers.get("Authorization", "").strip()
        if not header:
            return None
        scheme, _, token = header.partition(" ")
        if scheme.lower() == "bearer" and token.strip():
            return token.strip()
        # Any other scheme is passed on as-is so verification rejects it.
        return header

    def payload_for(self, credential: str) -> dict[str, str]:
        return {"token": credential}

    def attach(self, response: Response, credential: str) -> None:
        return None

    def clear(self, response: Response) -> None:
        return None


class AuthGate:
    def __init__(self, *, authenticator: Authenticator, transport: CredentialTransport) -> None:
        self.authenticator = authenticator
        self.transport = transport

    def current_identity(self) -> Identity:
        identity = self.authenticator.resolve(self.transport.read())
        g.identity = identity
        g.user_id = identity.user_id
        return identity

    def required(self, view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            try:
                identity = self.current_identity()
            except Exception as exc:
                logger.warning(
                    f"Auth failed ({type(exc).__name__}) on {request.method} {request.path}"
                )
                raise
            logger.debug(f"Auth OK: user={identity.user_id} {request.method} {request.path}")
            return view(*args, **kwargs)

        return inner


def current_identity() -> Identity:
    """Identity resolved by ``AuthGate.required`` for the running request."""
    return g.identity


__all__ = [
    "AuthGate",
    "BearerTransport",
    "CookieTransport",
    "CredentialTransport",
    "current_identity",
]
