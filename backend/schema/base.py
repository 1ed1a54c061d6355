"""
Base schema classes for the Unit Master service.

This module provides:
- Base response model
- Notification descriptors for user-facing toasts
- Health check response
"""

from datetime import datetime, timezone
from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        validate_assignment=True,
        extra="forbid"
    )


class BaseResponse(BaseSchema):
    """Base response schema."""
    success: bool = Field(True, description="Whether the request was successful")
    message: str = Field("", description="Response message")
    trace_id: Optional[str] = Field(None, description="Request trace ID")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class NotificationType(str, Enum):
    """Toast notification kinds understood by the front end."""
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Notification(BaseSchema):
    """A toast notification the client should display."""
    type: NotificationType = Field(..., description="Notification kind")
    message: str = Field(..., description="Text shown to the user")


class HealthCheckResponse(BaseResponse):
    """Health check response schema."""
    status: str = Field("healthy", description="Service status")
    version: str = Field("", description="Application version")
    environment: str = Field("", description="Environment name")
    services: Dict[str, bool] = Field(default_factory=dict, description="Service initialization status")
