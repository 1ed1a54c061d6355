"""
Models package for the Unit Master service.
"""
from .upload import (
    UploadedFile,
    ValidationResult,
    StoredFile
)

__all__ = [
    "UploadedFile",
    "ValidationResult",
    "StoredFile"
]
