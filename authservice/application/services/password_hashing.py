"""Password hashing strategies."""

from __future__ import annotations

import bcrypt
from werkzeug.security import check_password_hash, generate_password_hash

from authservice.domain.users.repositories import PasswordHasher
from authservice.shared.errors.base import PasswordHashingError
from authservice.shared.logging import logger

DEFAULT_BCRYPT_ROUNDS = 10


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        try:
            return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self._rounds)).decode()
        except (ValueError, TypeError) as exc:
            logger.error(f"passwords.hash: bcrypt failed ({type(exc).__name__})")
            raise PasswordHashingError() from exc

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode(), hashed.encode())
        except (ValueError, TypeError):
            return False


class WerkzeugPasswordHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        try:
            return str(generate_password_hash(password))
        except (ValueError, TypeError) as exc:
            logger.error(f"passwords.hash: werkzeug failed ({type(exc).__name__})")
            raise PasswordHashingError() from exc

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError):
            return False


def build_password_hasher(scheme: str, *, bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS) -> PasswordHasher:
    if scheme == "werkzeug":
        return WerkzeugPasswordHasher()
    return BcryptPasswordHasher(rounds=bcrypt_rounds)
