"""
Top‑level router for version 1 of the API.

When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import customers, health

router = APIRouter()

router.include_router(customers.router, prefix="/customers", tags=["customers"])
router.include_router(health.router, prefix="/health", tags=["health"])
