"""Block until the database accepts connections."""

from __future__ import annotations

import logging
import time
from typing import Callable

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError

from app.core.errors import DependencyUnavailableError

logger = logging.getLogger(__name__)

VALIDATION_QUERY = "SELECT 1"


def probe(engine: Engine) -> None:
    """Open one connection and run the validation query."""
    with engine.connect() as conn:
        conn.execute(text(VALIDATION_QUERY))


def wait_for_database(
    engine: Engine,
    timeout: float = 60.0,
    interval: float = 1.0,
    *,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> int:
    """Probe the database until it answers; return the number of attempts.

    Raises DependencyUnavailableError once ``timeout`` seconds have passed
    without a successful probe.
    """
    deadline = clock() + timeout
    attempt = 0
    while True:
        attempt += 1
        try:
            probe(engine)
        except DBAPIError as exc:
            logger.warning("Database not ready (attempt %d): %s", attempt, exc.orig or exc)
            if clock() + interval > deadline:
                raise DependencyUnavailableError(
                    f"database still unreachable after {timeout:g}s ({attempt} attempts)"
                ) from exc
            sleep(interval)
        else:
            logger.info("Database ready after %d attempt(s).", attempt)
            return attempt
