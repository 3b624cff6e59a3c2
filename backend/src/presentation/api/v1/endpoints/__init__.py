"""
API V1 Endpoints Package
Exports routers used by main app
"""
from .auth import router as auth_router
from .jobs import router as jobs_router

__all__ = [
    "auth_router",
    "jobs_router"
]
