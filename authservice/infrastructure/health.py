# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time

from sqlalchemy import text
from sqlalchemy.engine import Engine

from authservice.infrastructure.db import ENGINE


def probe_database(engine: Engine = ENGINE) -> dict[str, object]:
    """Round-trip a trivial query; raises ``SQLAlchemyError`` when unreachable."""
    started = time.perf_counter()
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    return {
        "dialect": engine.dialect.name,
        "latency_ms": round((time.perf_counter() - started) * 1000.0, 2),
    }


__all__ = ["probe_database"]
