"""
Test infrastructure for the Unit Master service.

This module provides:
- Test data generators
- Common assertions
- Mock streams
"""

from .fixtures import *
from .utils import *
from .mocks import *

__all__ = [
    "create_test_upload",
    "create_test_upload_settings",
    "create_test_settings",
    "unique_name_regex",
    "list_files",
    "TestHelper",
    "FailingStream"
]
