"""Greeting lookup."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import DBAPIError, DisconnectionError
from sqlalchemy.orm import Session

from app.core.errors import StorageUnavailableError
from app.models.human import Human

logger = logging.getLogger(__name__)

DEFAULT_NAME = "World"


class HumanRepository:
    """Read access to the ``human`` table."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, human_id: int) -> Human | None:
        """Point lookup by primary key."""
        try:
            return self._db.get(Human, human_id)
        except (DBAPIError, DisconnectionError) as exc:
            logger.error("Lookup of human %s failed: %s", human_id, exc)
            raise StorageUnavailableError("database unavailable") from exc

    def find_by_name(self, name: str) -> list[Human]:
        try:
            return list(self._db.scalars(select(Human).where(Human.name == name)))
        except (DBAPIError, DisconnectionError) as exc:
            logger.error("Lookup of human named %r failed: %s", name, exc)
            raise StorageUnavailableError("database unavailable") from exc


def format_greeting(human: Human | None) -> str:
    if human is None:
        return f"Hello {DEFAULT_NAME}!\n"
    # stored rows may carry a NULL name
    name = "null" if human.name is None else human.name
    return f"Hello {name}!\n"


def get_greeting(db: Session, human_id: int = 0) -> str:
    """Return the greeting for ``human_id``; unknown ids get the default greeting."""
    return format_greeting(HumanRepository(db).find_by_id(human_id))
