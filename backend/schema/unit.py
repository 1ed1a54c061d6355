"""
Unit Master request/response schemas.
"""

from typing import Any, Dict, List, Optional
from pydantic import Field

from models.upload import StoredFile
from .base import BaseResponse, Notification


class UnitIndexResponse(BaseResponse):
    """Unit Master index page data."""
    portal_name: str = Field(..., description="Portal display name")
    units: List[str] = Field(default_factory=list, description="Existing units")


class AddUnitFormResponse(BaseResponse):
    """Descriptor of the create-unit form."""
    fields: List[str] = Field(default_factory=lambda: ["unit_name", "file"], description="Form field names")
    allowed_extensions: List[str] = Field(..., description="Accepted upload extensions")
    max_file_size_mb: int = Field(..., description="Maximum upload size in MB")


class CreateUnitResponse(BaseResponse):
    """Result of a create-unit submission."""
    unit_name: str = Field(..., description="Name of the created unit")
    stored_file: Optional[StoredFile] = Field(None, description="Uploaded file, when one was sent")
    notification: Optional[Notification] = Field(None, description="Toast to display")
    redirect_to: Optional[str] = Field(None, description="Page to navigate to next")


class LookupsResponse(BaseResponse):
    """Drop-down values for role and account status selectors."""
    roles: List[Dict[str, Any]] = Field(default_factory=list, description="User roles")
    account_statuses: List[Dict[str, Any]] = Field(default_factory=list, description="Account statuses")
