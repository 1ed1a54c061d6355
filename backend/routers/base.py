"""
Base router with common dependencies and utilities.
"""
from fastapi import APIRouter, HTTPException
from typing import Optional
from services.unit_service import UnitService


class BaseRouter:
    """Base router class with common dependencies."""

    def __init__(self):
        self.unit_service: Optional[UnitService] = None

    def set_services(self, unit_service: UnitService):
        """Set application services."""
        self.unit_service = unit_service

    def check_services(self):
        """Check if all services are initialized."""
        if self.unit_service is None:
            raise HTTPException(status_code=503, detail="Services not initialized")

    def get_router(self) -> APIRouter:
        """Get the router instance. Override in subclasses."""
        raise NotImplementedError("Subclasses must implement get_router")
