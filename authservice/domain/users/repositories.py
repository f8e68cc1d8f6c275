# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Identity, Session, User


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> User | None: ...
    def find_by_name_or_email(self, name: str, email: str) -> User | None: ...
    def add(self, user: User) -> User: ...
    def list_all(self) -> Sequence[User]: ...
    def delete_all(self) -> int: ...


class SessionStore(Protocol):
    def create(self, identity: Identity) -> Session: ...
    def get(self, session_id: str) -> Session | None: ...
    def revoke(self, session_id: str) -> None: ...
    def clear(self) -> int: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class Authenticator(Protocol):
    """Establishes and resolves the credential a caller presents.

    ``establish`` returns the opaque credential handed to the client,
    ``resolve`` turns a presented credential back into an identity or raises
    an ``UnauthorizedError`` subclass, ``revoke`` forgets a credential where
    the mechanism keeps server-side state.
    """

    def establish(self, identity: Identity) -> str: ...
    def resolve(self, credential: str | None) -> Identity: ...
    def revoke(self, credential: str | None) -> None: ...
