"""HTTP routes."""

from fastapi import APIRouter

from acme_auth.api import auth, callback, health, home

router = APIRouter()
router.include_router(home.router, tags=["pages"])
router.include_router(auth.router, prefix="/api/auth", tags=["auth"])
router.include_router(callback.router, tags=["auth"])
router.include_router(health.router, prefix="/health", tags=["health"])
