# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Identity, Session, User
from .repositories import Authenticator, PasswordHasher, SessionStore, UserRepository

__all__ = [
    "Authenticator",
    "Identity",
    "PasswordHasher",
    "Session",
    "SessionStore",
    "User",
    "UserRepository",
]
