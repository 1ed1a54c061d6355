"""
Stateless helper modules for the Unit Master service.

Available helpers:
- file_helper: upload validation, unique naming, saving and deleting files
- encryption_helper: AES encryption/decryption, key/IV/salt generation, hashing
- constants: application-wide constants
- enums: user role and account status enums
"""

from . import constants, encryption_helper, enums, file_helper

__all__ = [
    "constants",
    "encryption_helper",
    "enums",
    "file_helper"
]
