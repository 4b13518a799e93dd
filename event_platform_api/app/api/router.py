"""
Top-level router.

Aggregates the domain routers under their prefixes.  When a new domain
router is added to ``endpoints``, include it here.
"""

from fastapi import APIRouter

from .endpoints import health, newsletter

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(newsletter.router, prefix="/newsletter", tags=["newsletter"])
