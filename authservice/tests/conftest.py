from __future__ import annotations

import os
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-the-suite")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-that-is-long-enough-for-hs256")
os.environ.setdefault("PASSWORD_BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FILE", str(Path(tempfile.gettempdir()) / "authservice-tests.log"))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402

from authservice.app import create_app  # noqa: E402
from authservice.infrastructure.container import Container  # noqa: E402
from authservice.infrastructure.db import ENGINE, Base  # noqa: E402
from authservice.infrastructure.db import models  # noqa: E402,F401
from authservice.shared.config import AppConfig  # noqa: E402


@pytest.fixture()
def reset_database() -> Iterator[None]:
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture()
def make_app(reset_database: None) -> Callable[..., Flask]:
    def _make(**overrides: object) -> Flask:
        return create_app(Container(AppConfig(**overrides)))

    return _make
