"""
Test utilities and helper functions.
"""

import os
import re
from typing import Any, Dict

UNIQUE_NAME_PATTERN = r"_[0-9a-f]{8}"


def unique_name_regex(stem: str, extension: str) -> "re.Pattern":
    """Regex for a generated unique name built from ``stem`` and ``extension``."""
    return re.compile(f"^{re.escape(stem)}{UNIQUE_NAME_PATTERN}{re.escape(extension)}$")


def list_files(root: str) -> list:
    """All files below ``root``, relative to it."""
    found = []
    for dir_path, _, file_names in os.walk(root):
        for file_name in file_names:
            found.append(os.path.relpath(os.path.join(dir_path, file_name), root))
    return found


class TestHelper:
    """Helper class for common test assertions."""

    __test__ = False

    @staticmethod
    def assert_error_response(data: Dict[str, Any], category: str, message: str):
        """Assert that an error body has the standard shape."""
        assert data["success"] is False
        assert data["category"] == category
        assert data["message"] == message
        assert data["trace_id"]
        assert data["timestamp"]

    @staticmethod
    def assert_response_success(data: Dict[str, Any]):
        """Assert that API response indicates success."""
        assert data["success"] is True
        assert data["message"] is not None
