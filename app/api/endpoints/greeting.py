"""Greeting endpoint."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.core.errors import StorageUnavailableError
from app.db.session import get_db
from app.services.greeting import get_greeting

router = APIRouter(tags=["greeting"])


@router.get("/", response_class=PlainTextResponse)
def greet(id: int = 0, db: Session = Depends(get_db)) -> str:  # noqa: A002
    """Greet the human with the given id, or the World."""
    try:
        return get_greeting(db, id)
    except StorageUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
