"""
Root router for basic system information.
"""
from fastapi import APIRouter
from .base import BaseRouter
from helpers.constants import AppConstants


class RootRouter(BaseRouter):
    """Router for root endpoints."""

    def __init__(self, version: str = "1.0.0"):
        super().__init__()
        self.version = version

    def get_router(self) -> APIRouter:
        """Get root router."""
        router = APIRouter(tags=["root"])

        @router.get("/")
        async def root():
            """Root endpoint with portal information."""
            return {
                "message": f"{AppConstants.PORTAL_NAME} API is running",
                "description": "Unit Master administration",
                "version": self.version,
                "entry_point": "/master/units"
            }

        return router
