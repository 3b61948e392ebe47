"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers (cards, settings, upload,
auth) under a unified prefix.  When a new resource is added, include
its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    auth,
    cards,
    settings,
    upload,
)

router = APIRouter()

router.include_router(cards.router, prefix="/cards", tags=["cards"])
router.include_router(settings.router, prefix="/settings", tags=["settings"])
router.include_router(upload.router, prefix="/upload", tags=["upload"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
