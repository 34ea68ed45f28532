"""
Top-level API router.

Aggregates the resource routers.  The application mounts this router
under ``Settings.api_prefix`` (``/api`` by default).
"""

from fastapi import APIRouter

from .endpoints import camps, speakers

router = APIRouter()

router.include_router(camps.router, prefix="/camps", tags=["camps"])
router.include_router(speakers.router, prefix="/camps/{moniker}/speakers", tags=["speakers"])
