"""
Hashing and symmetric encryption helpers.

Encryption uses AES in CBC mode with PKCS7 padding. Keys and IVs are passed
as text and must be exactly 16 bytes once UTF-8 encoded.

``DEFAULT_KEY`` and ``DEFAULT_IV`` are sample values shared by every caller
that does not pass its own. They are insecure and must not protect real data.

``generate_hash`` is a single SHA-256 round over ``password + salt``. It is
not a password hashing scheme (no work factor) and is unsuitable for storing
production passwords.
"""
import base64
import binascii
import hashlib
import logging
import secrets
from typing import Optional

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from core.exceptions import ErrorCode, InternalException, ValidationException

logger = logging.getLogger("helpers")

# Insecure sample values, kept for compatibility with existing cipher texts.
DEFAULT_KEY = "1234567890123456"  # 16 bytes = 128-bit key
DEFAULT_IV = "6543210987654321"  # 16 bytes = 128-bit IV

KEY_AND_IV_LENGTH = 16
AES_BLOCK_SIZE_BITS = 128
SUPPORTED_AES_KEY_SIZES = (128, 192, 256)


def _validate_key_and_iv(key: str, iv: str) -> None:
    if key is None or len(key.encode("utf-8")) != KEY_AND_IV_LENGTH:
        raise ValidationException("Encryption key must be exactly 16 bytes (128-bit AES).")
    if iv is None or len(iv.encode("utf-8")) != KEY_AND_IV_LENGTH:
        raise ValidationException("Initialization Vector (IV) must be exactly 16 bytes (128-bit AES).")
    if key == DEFAULT_KEY or iv == DEFAULT_IV:
        logger.warning("Using the built-in sample AES key/IV; not suitable for production data")


def _build_cipher(key: str, iv: str) -> Cipher:
    return Cipher(algorithms.AES(key.encode("utf-8")), modes.CBC(iv.encode("utf-8")))


def encrypt(plain_text: Optional[str], key: str = DEFAULT_KEY, iv: str = DEFAULT_IV) -> str:
    """Encrypt ``plain_text`` and return the base64 encoded cipher text."""
    if not plain_text:
        raise ValueError("plain_text must not be empty")
    _validate_key_and_iv(key, iv)

    padder = padding.PKCS7(AES_BLOCK_SIZE_BITS).padder()
    padded = padder.update(plain_text.encode("utf-8")) + padder.finalize()

    encryptor = _build_cipher(key, iv).encryptor()
    cipher_bytes = encryptor.update(padded) + encryptor.finalize()
    return base64.b64encode(cipher_bytes).decode("ascii")


def decrypt(cipher_text: Optional[str], key: str = DEFAULT_KEY, iv: str = DEFAULT_IV) -> str:
    """
    Decrypt a base64 cipher text produced by ``encrypt``.

    Raises:
        ValueError: cipher_text is empty.
        ValidationException: key or IV has the wrong length.
        InternalException: the cipher text is not valid base64 or does not
            decrypt under the given key and IV.
    """
    if not cipher_text:
        raise ValueError("cipher_text must not be empty")
    _validate_key_and_iv(key, iv)

    try:
        cipher_bytes = base64.b64decode(cipher_text, validate=True)
        decryptor = _build_cipher(key, iv).decryptor()
        padded = decryptor.update(cipher_bytes) + decryptor.finalize()

        unpadder = padding.PKCS7(AES_BLOCK_SIZE_BITS).unpadder()
        plain_bytes = unpadder.update(padded) + unpadder.finalize()
        return plain_bytes.decode("utf-8")
    except (binascii.Error, ValueError) as e:
        logger.warning(f"Decryption failed: {e}")
        raise InternalException(
            "Cipher text could not be decrypted with the supplied key and IV.",
            error_code=ErrorCode.CRYPTOGRAPHY_ERROR,
            original_exception=e
        ) from e


def generate_aes_key(key_size: int = 128) -> str:
    """Generate a random AES key of ``key_size`` bits (128, 192 or 256), base64 encoded."""
    if key_size not in SUPPORTED_AES_KEY_SIZES:
        raise ValidationException("AES key size must be one of 128, 192 or 256 bits.")
    return base64.b64encode(secrets.token_bytes(key_size // 8)).decode("ascii")


def generate_aes_iv() -> str:
    """Generate a random 128-bit AES initialization vector, base64 encoded."""
    return base64.b64encode(secrets.token_bytes(AES_BLOCK_SIZE_BITS // 8)).decode("ascii")


def generate_salt(length: int = 16) -> str:
    """Generate ``length`` random bytes for password hashing, base64 encoded."""
    if length < 1:
        raise ValueError("Salt length must be positive")
    return base64.b64encode(secrets.token_bytes(length)).decode("ascii")


def generate_hash(password: Optional[str], salt: Optional[str]) -> str:
    """Return the lowercase hex SHA-256 digest of ``password + salt``."""
    if not password:
        raise ValueError("password must not be empty")
    if not salt:
        raise ValueError("salt must not be empty")

    return hashlib.sha256((password + salt).encode("utf-8")).hexdigest()
