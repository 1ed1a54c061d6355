"""
Schema module for the Unit Master service.

Usage:
    from schema import CreateUnitResponse, Notification
    from schema.base import BaseResponse
"""

from .base import (
    BaseSchema,
    BaseResponse,
    NotificationType,
    Notification,
    HealthCheckResponse
)

from .unit import (
    UnitIndexResponse,
    AddUnitFormResponse,
    CreateUnitResponse,
    LookupsResponse
)

__all__ = [
    "BaseSchema",
    "BaseResponse",
    "NotificationType",
    "Notification",
    "HealthCheckResponse",
    "UnitIndexResponse",
    "AddUnitFormResponse",
    "CreateUnitResponse",
    "LookupsResponse"
]
