"""
File helper for validating, naming, saving and deleting uploaded files.

The helpers know nothing about HTTP; callers hand in an ``UploadedFile``.

Known limitations:
- ``save_file_to_disk`` is not atomic. An interrupted copy leaves a partial file.
- Concurrent saves to the same destination path race on overwrite; there is
  no locking.
"""
import logging
import os
import re
import uuid
from typing import Iterable, Optional

import anyio
import anyio.to_thread
from aiofile import async_open

from models.upload import UploadedFile, ValidationResult

logger = logging.getLogger("helpers")

ALLOWED_FILE_EXTENSIONS = (".pdf", ".docx", ".xlsx", ".png", ".jpg", ".jpeg")
MAX_FILE_SIZE_IN_BYTES = 10 * 1024 * 1024  # 10 MB

UNIQUE_STEM_LENGTH = 8
UNIQUE_ID_LENGTH = 8
COPY_CHUNK_SIZE = 64 * 1024

# Characters rejected by at least one major file system, plus ASCII control characters.
_INVALID_FILE_NAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def _split_name(file_name: str):
    """
    Return ``(stem, extension)`` of the last path component.

    The extension runs from the last dot to the end, so ``.pdf`` is all
    extension. A trailing dot with nothing after it is no extension.
    """
    base_name = os.path.basename(file_name.replace("\\", "/"))
    dot = base_name.rfind(".")
    if dot == -1:
        return base_name, ""
    extension = base_name[dot:]
    return base_name[:dot], extension if len(extension) > 1 else ""



def get_extension(file_name: str) -> str:
    """Lower-cased extension including the leading dot, or an empty string."""
    return _split_name(file_name or "")[1].lower()


def validate_file(
    file: Optional[UploadedFile],
    max_size: int = MAX_FILE_SIZE_IN_BYTES,
    allowed_extensions: Iterable[str] = ALLOWED_FILE_EXTENSIONS
) -> ValidationResult:
    """
    Validate an upload by emptiness, then size, then extension.

    Only the first failing check is reported.
    """
    if file is None or file.length == 0:
        return ValidationResult.failure("File is empty.")

    if file.length > max_size:
        return ValidationResult.failure(
            f"File size exceeds the maximum allowed size of {max_size // (1024 * 1024)}MB."
        )

    extension = get_extension(file.file_name)
    if extension not in tuple(allowed_extensions):
        return ValidationResult.failure(f"File type '{extension}' is not allowed.")

    return ValidationResult.success()


def is_valid_file_name(file_name: Optional[str]) -> bool:
    """Check the name is non-blank, has no reserved characters and no ``..`` sequence."""
    if not file_name or not file_name.strip():
        return False
    if _INVALID_FILE_NAME_CHARS.search(file_name):
        return False
    return ".." not in file_name


def is_valid_file_type(
    file_name: Optional[str],
    allowed_extensions: Iterable[str] = ALLOWED_FILE_EXTENSIONS
) -> bool:
    """Check only the extension against the allow-list."""
    return get_extension(file_name) in tuple(allowed_extensions)


def generate_unique_file_name(original_file_name: str) -> str:
    """
    Generate a unique file name from an uploaded file name.

    The stem is trimmed to 8 characters and followed by ``_``, an 8 character
    hex id taken from a UUID4, and the original extension.

    Args:
        original_file_name: The original file name with extension.

    Returns:
        A file name that is unique with overwhelming probability.
    """
    stem, extension = _split_name(original_file_name)
    short_id = uuid.uuid4().hex[:UNIQUE_ID_LENGTH]
    return f"{stem[:UNIQUE_STEM_LENGTH]}_{short_id}{extension}"


async def save_file_to_disk(
    file: Optional[UploadedFile],
    destination_folder: str,
    file_name: Optional[str] = None
) -> str:
    """
    Copy the upload stream to ``destination_folder`` and return the full path.

    The folder is created when missing. An existing file at the target path
    is overwritten. A unique name is generated when ``file_name`` is omitted.
    """
    if file is None or file.length == 0:
        raise ValueError("File is empty or null.")

    await anyio.Path(destination_folder).mkdir(parents=True, exist_ok=True)

    safe_file_name = file_name or generate_unique_file_name(file.file_name)
    full_path = os.path.join(destination_folder, safe_file_name)

    written = 0
    try:
        async with async_open(full_path, "wb") as target:
            while True:
                chunk = await anyio.to_thread.run_sync(file.stream.read, COPY_CHUNK_SIZE)
                if not chunk:
                    break
                await target.write(chunk)
                written += len(chunk)
    except Exception:
        logger.exception(f"Error saving file {safe_file_name} to {destination_folder}")
        raise

    logger.info(f"File {safe_file_name} saved to {destination_folder} ({written} bytes)")
    return full_path


def delete_file(file_path: str) -> bool:
    """Delete ``file_path`` if it exists; return whether a file was removed."""
    if not os.path.isfile(file_path):
        return False

    os.remove(file_path)
    logger.info(f"File deleted: {file_path}")
    return True
