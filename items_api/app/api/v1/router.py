"""
Top-level router for version 1 of the API.

New resources get their own module under ``endpoints`` and are included
here with their prefix.
"""

from fastapi import APIRouter

from .endpoints import health, items

router = APIRouter()

router.include_router(items.router, prefix="/items", tags=["items"])
router.include_router(health.router, prefix="/health", tags=["health"])
