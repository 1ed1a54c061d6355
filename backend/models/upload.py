"""
Upload value types shared by the file helper and the unit service.
"""
from dataclasses import dataclass
from typing import BinaryIO
from pydantic import BaseModel, Field


@dataclass
class UploadedFile:
    """Framework-independent description of an uploaded file."""
    file_name: str
    length: int
    stream: BinaryIO


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation; ``message`` is set if and only if ``ok`` is false."""
    ok: bool
    message: str = ""

    def __post_init__(self):
        if self.ok == bool(self.message):
            raise ValueError("A successful result carries no message; a failed one requires it")

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, message: str) -> "ValidationResult":
        return cls(ok=False, message=message)


class StoredFile(BaseModel):
    """A file persisted by the upload flow."""
    path: str = Field(..., description="Full path of the written file")
    generated_name: str = Field(..., description="Unique file name used on disk")
