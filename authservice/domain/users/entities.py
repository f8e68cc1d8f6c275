# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    name: str
    email: str
    password_hash: str
    created_at: datetime

    def identity(self) -> Identity:
        return Identity(user_id=self.id, name=self.name, email=self.email)


@dataclass(slots=True, frozen=True)
class Identity:
    """The authenticated caller, as carried by a session or a token."""

    user_id: int
    name: str
    email: str

    def to_dict(self) -> dict[str, object]:
        return {"id": self.user_id, "name": self.name, "email": self.email}


@dataclass(slots=True, frozen=True)
class Session:

    session_id: str
    identity: Identity
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
