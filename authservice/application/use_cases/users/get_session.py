# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authservice.domain.users.entities import Identity
from authservice.domain.users.repositories import Authenticator


class GetSessionUseCase:
    def __init__(self, *, authenticator: Authenticator) -> None:
        self._authenticator = authenticator

    def execute(self, credential: str | None) -> Identity:
        return self._authenticator.resolve(credential)


__all__ = ["GetSessionUseCase"]
