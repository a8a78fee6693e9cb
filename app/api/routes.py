"""Root API router."""

from fastapi import APIRouter

from app.api.endpoints import greeting

router = APIRouter()
router.include_router(greeting.router)
