"""
Test fixtures for generating test data.
"""

import io
from pathlib import Path
from typing import Optional, Union

from config.settings import Environment, Settings, UploadSettings
from models.upload import UploadedFile

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def create_test_upload(
    file_name: str = "logo.png",
    content: bytes = PNG_BYTES,
    length: Optional[int] = None
) -> UploadedFile:
    """Create an upload; ``length`` overrides the declared size without allocating it."""
    return UploadedFile(
        file_name=file_name,
        length=len(content) if length is None else length,
        stream=io.BytesIO(content)
    )


def create_test_upload_settings(root_dir: Union[str, Path], **overrides) -> UploadSettings:
    """Create upload settings rooted in a temporary directory."""
    return UploadSettings(root_dir=str(root_dir), **overrides)


def create_test_settings(root_dir: Union[str, Path], **upload_overrides) -> Settings:
    """Create application settings suitable for tests."""
    return Settings(
        environment=Environment.TESTING,
        debug=True,
        log_file=False,
        upload=create_test_upload_settings(root_dir, **upload_overrides)
    )
