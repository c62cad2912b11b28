"""
Top‑level API router.

Aggregates the domain routers under their prefixes.  ``create_app``
mounts this router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import export, health, participants, statistics

router = APIRouter()

router.include_router(participants.router, prefix="/participants", tags=["participants"])
router.include_router(statistics.router, prefix="/statistics", tags=["statistics"])
router.include_router(export.router, prefix="/export", tags=["export"])
router.include_router(health.router, prefix="/health", tags=["health"])
