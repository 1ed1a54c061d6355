"""
Health and status router.
"""
from fastapi import APIRouter
from .base import BaseRouter
from schema.base import HealthCheckResponse


class HealthRouter(BaseRouter):
    """Router for health and status endpoints."""

    def __init__(self, version: str = "", environment: str = ""):
        super().__init__()
        self.version = version
        self.environment = environment

    def get_router(self) -> APIRouter:
        """Get health router."""
        router = APIRouter(prefix="/health", tags=["health"])

        @router.get("/", response_model=HealthCheckResponse)
        async def health_check():
            """Health check endpoint."""
            return HealthCheckResponse(
                status="healthy",
                version=self.version,
                environment=self.environment,
                services={"unit_service": self.unit_service is not None}
            )

        return router
