"""
Services module for the Unit Master service.

Available services:
- UnitService: create-unit flow (name validation, file validation and storage)
"""

from .unit_service import UnitService, CreateUnitResult

__all__ = [
    "UnitService",
    "CreateUnitResult"
]
