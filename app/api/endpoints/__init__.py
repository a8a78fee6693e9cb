"""Expose API endpoint routers."""

from app.api.endpoints import greeting

__all__ = ["greeting"]
