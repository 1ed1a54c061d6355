"""
Unit tests for the encryption helper.

The built-in DEFAULT_KEY/DEFAULT_IV are insecure sample values; the tests
exercise them only to pin down the compatible default behaviour.
"""

import base64
from unittest.mock import patch

import pytest

from core.exceptions import ErrorCategory, InternalException, ValidationException
from helpers import encryption_helper
from helpers.encryption_helper import (
    DEFAULT_IV,
    DEFAULT_KEY,
    decrypt,
    encrypt,
    generate_aes_iv,
    generate_aes_key,
    generate_hash,
    generate_salt,
)

CUSTOM_KEY = "k" * 16
CUSTOM_IV = "v" * 16


class TestEncryptDecrypt:
    """Test cases for AES encryption and decryption."""

    @pytest.mark.parametrize("plain_text", [
        "a",
        "Unit Master",
        "exactly16bytes!!",
        "नमस्ते दुनिया",
        "x" * 5000,
    ])
    def test_round_trip_with_default_key(self, plain_text):
        assert decrypt(encrypt(plain_text)) == plain_text

    def test_round_trip_with_custom_key_and_iv(self):
        cipher_text = encrypt("secret", CUSTOM_KEY, CUSTOM_IV)

        assert decrypt(cipher_text, CUSTOM_KEY, CUSTOM_IV) == "secret"

    def test_multibyte_key_of_sixteen_bytes_is_accepted(self):
        key = "é" * 8  # 8 characters, 16 bytes in UTF-8

        assert decrypt(encrypt("hello", key, CUSTOM_IV), key, CUSTOM_IV) == "hello"

    @pytest.mark.parametrize("plain_text,cipher_text", [
        ("hello", "WcQYnUww0VTFgh1HE4gepg=="),
        ("Unit Master", "hlwpZi4QwSjJ8IlZBhr6cQ=="),
    ])
    def test_known_cipher_text_under_default_key(self, plain_text, cipher_text):
        # AES-128-CBC, PKCS7, key "1234567890123456", IV "6543210987654321"
        assert encrypt(plain_text) == cipher_text
        assert decrypt(cipher_text) == plain_text

    def test_same_inputs_give_same_cipher_text(self):
        assert encrypt("hello", CUSTOM_KEY, CUSTOM_IV) == encrypt("hello", CUSTOM_KEY, CUSTOM_IV)

    def test_different_iv_gives_different_cipher_text(self):
        assert encrypt("hello", CUSTOM_KEY, CUSTOM_IV) != encrypt("hello", CUSTOM_KEY, "w" * 16)

    def test_cipher_text_is_base64_of_whole_blocks(self):
        raw = base64.b64decode(encrypt("hello"))

        assert len(raw) == 16
        assert raw != b"hello"

    @pytest.mark.parametrize("plain_text", ["", None])
    def test_empty_plain_text_raises(self, plain_text):
        with pytest.raises(ValueError):
            encrypt(plain_text)

    @pytest.mark.parametrize("cipher_text", ["", None])
    def test_empty_cipher_text_raises(self, cipher_text):
        with pytest.raises(ValueError):
            decrypt(cipher_text)

    @pytest.mark.parametrize("operation", [encrypt, decrypt])
    @pytest.mark.parametrize("key", ["short", "12345678901234567", "é" * 16, ""])
    def test_wrong_key_length_fails_before_any_crypto(self, operation, key):
        with patch.object(encryption_helper, "_build_cipher") as build_cipher:
            with pytest.raises(ValidationException) as exc_info:
                operation("payload", key, CUSTOM_IV)

        assert exc_info.value.category == ErrorCategory.VALIDATION
        assert exc_info.value.message == "Encryption key must be exactly 16 bytes (128-bit AES)."
        build_cipher.assert_not_called()

    @pytest.mark.parametrize("operation", [encrypt, decrypt])
    @pytest.mark.parametrize("iv", ["short", "12345678901234567"])
    def test_wrong_iv_length_fails_before_any_crypto(self, operation, iv):
        with patch.object(encryption_helper, "_build_cipher") as build_cipher:
            with pytest.raises(ValidationException) as exc_info:
                operation("payload", CUSTOM_KEY, iv)

        assert exc_info.value.message == "Initialization Vector (IV) must be exactly 16 bytes (128-bit AES)."
        build_cipher.assert_not_called()

    def test_invalid_base64_is_an_internal_error(self):
        with pytest.raises(InternalException) as exc_info:
            decrypt("not base64 at all!", CUSTOM_KEY, CUSTOM_IV)

        assert exc_info.value.category == ErrorCategory.SYSTEM
        assert exc_info.value.original_exception is not None

    def test_truncated_cipher_text_is_an_internal_error(self):
        truncated = base64.b64encode(b"12345").decode("ascii")

        with pytest.raises(InternalException) as exc_info:
            decrypt(truncated, CUSTOM_KEY, CUSTOM_IV)

        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_default_key_use_is_logged_as_warning(self):
        with patch.object(encryption_helper, "logger") as mock_logger:
            encrypt("hello")
            encrypt("hello", CUSTOM_KEY, CUSTOM_IV)

        assert mock_logger.warning.call_count == 1

    def test_defaults_are_sixteen_bytes(self):
        assert len(DEFAULT_KEY.encode("utf-8")) == 16
        assert len(DEFAULT_IV.encode("utf-8")) == 16


class TestKeyMaterialGeneration:
    """Test cases for key, IV and salt generation."""

    @pytest.mark.parametrize("key_size", [128, 192, 256])
    def test_generate_aes_key_sizes(self, key_size):
        assert len(base64.b64decode(generate_aes_key(key_size))) == key_size // 8

    def test_generate_aes_key_defaults_to_128_bits(self):
        assert len(base64.b64decode(generate_aes_key())) == 16

    @pytest.mark.parametrize("key_size", [0, 64, 100, 512])
    def test_generate_aes_key_rejects_unsupported_sizes(self, key_size):
        with pytest.raises(ValidationException):
            generate_aes_key(key_size)

    def test_generate_aes_iv(self):
        first, second = generate_aes_iv(), generate_aes_iv()

        assert len(base64.b64decode(first)) == 16
        assert first != second

    def test_generate_salt_lengths(self):
        assert len(base64.b64decode(generate_salt())) == 16
        assert len(base64.b64decode(generate_salt(32))) == 32

    def test_generate_salt_rejects_non_positive_length(self):
        with pytest.raises(ValueError):
            generate_salt(0)


class TestGenerateHash:
    """
    Test cases for the salted hash.

    generate_hash is a single SHA-256 round: fine for compatibility, unsuitable
    for production password storage.
    """

    def test_known_digest(self):
        # SHA-256("abc")
        assert generate_hash("ab", "c") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    def test_is_deterministic(self):
        assert generate_hash("p@ssw0rd", "salt") == generate_hash("p@ssw0rd", "salt")

    def test_different_salts_give_different_digests(self):
        assert generate_hash("p@ssw0rd", generate_salt()) != generate_hash("p@ssw0rd", generate_salt())

    def test_output_is_lowercase_hex(self):
        digest = generate_hash("Password", "SALT")

        assert len(digest) == 64
        assert digest == digest.lower()
        int(digest, 16)

    @pytest.mark.parametrize("password,salt", [("", "salt"), (None, "salt"), ("pw", ""), ("pw", None)])
    def test_empty_inputs_raise(self, password, salt):
        with pytest.raises(ValueError):
            generate_hash(password, salt)
