"""
Unit service implementing the create-unit flow.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from config.settings import UploadSettings
from core.exceptions import ErrorCode, ErrorDetail, ValidationException, raise_validation_error
from helpers import file_helper
from models.upload import StoredFile, UploadedFile

logger = logging.getLogger("api")


@dataclass
class CreateUnitResult:
    """Outcome of a successful unit creation."""
    unit_name: str
    stored_file: Optional[StoredFile] = None


class UnitService:
    """Validates unit submissions and persists the optional uploaded file."""

    def __init__(self, upload_settings: UploadSettings):
        self.upload_settings = upload_settings

    async def create_unit(self, unit_name: Optional[str], upload: Optional[UploadedFile] = None) -> CreateUnitResult:
        """
        Create a unit from its name and an optional file.

        Nothing is written to disk unless both the name and the file are valid.

        Raises:
            ValidationException: blank unit name or unacceptable file.
        """
        if unit_name is None or not unit_name.strip():
            raise_validation_error(
                "Unit name is required.",
                field="unit_name",
                value=unit_name,
                error_code=ErrorCode.MISSING_REQUIRED_FIELD
            )

        stored_file = None
        if upload is not None:
            stored_file = await self._store_upload(upload)

        logger.info(f"Unit '{unit_name}' created"
                    + (f" with file {stored_file.generated_name}" if stored_file else ""))
        return CreateUnitResult(unit_name=unit_name, stored_file=stored_file)

    async def _store_upload(self, upload: UploadedFile) -> StoredFile:
        result = file_helper.validate_file(
            upload,
            max_size=self.upload_settings.max_file_size_bytes,
            allowed_extensions=self.upload_settings.allowed_extensions
        )
        if not result.ok:
            raise ValidationException(
                message=result.message,
                details=[ErrorDetail(field="file", message=result.message, value=upload.file_name)],
                error_code=ErrorCode.INVALID_FILE
            )

        unique_file_name = file_helper.generate_unique_file_name(upload.file_name)
        path = await file_helper.save_file_to_disk(
            upload, self.upload_settings.upload_path, unique_file_name
        )
        return StoredFile(path=path, generated_name=unique_file_name)
