"""
Extended Vigenere Cipher

Vigenere cipher over the full byte range. Every byte of the payload is
significant, so arbitrary binary data round-trips exactly.

Text payloads are encoded as UTF-8 before encryption; the ciphertext is
then rendered with one character per byte. Binary payloads stay bytes.
"""

import logging
import numpy as np
from typing import Union

from ..alphabet.codec import BYTE_MODULUS, byte_string, string_bytes, text_to_bytes
from ..keys.material import ByteKey
from .base import CipherStrategy, register_cipher

logger = logging.getLogger(__name__)

Payload = Union[str, bytes, bytearray, memoryview]

TEXT_ENCODING = 'utf-8'


def _shift_bytes(data: bytes, key: ByteKey, direction: int) -> bytes:
    """
    Add (or subtract) the repeating key to the data modulo 256.

    Args:
        data: The payload bytes
        key: The byte key
        direction: 1 to encrypt, -1 to decrypt

    Returns:
        The transformed bytes
    """
    if not key or not data:
        return bytes(data)

    values = np.frombuffer(bytes(data), dtype=np.uint8).astype(np.int64)
    key_stream = np.resize(np.frombuffer(key.data, dtype=np.uint8).astype(np.int64), values.size)

    return np.mod(values + direction * key_stream, BYTE_MODULUS).astype(np.uint8).tobytes()


@register_cipher
class ExtendedVigenereCipher(CipherStrategy):
    """Byte-wise Vigenere cipher over the 256-value alphabet."""

    name = "extended"
    description = "Extended Vigenere over all 256 byte values (text or binary)."
    key_type = ByteKey

    def encrypt(self, plaintext: Payload, key: ByteKey) -> Union[str, bytes]:
        """
        Encrypt text or binary data.

        Args:
            plaintext: A string or a bytes-like buffer
            key: The raw byte key

        Returns:
            bytes for binary input; for text input, a string holding one
            character per ciphertext byte
        """
        self.check_key(key)
        if isinstance(plaintext, str):
            data = text_to_bytes(plaintext, TEXT_ENCODING)
            logger.debug(f"Extended encrypt (text): {len(data)} bytes")
            return byte_string(_shift_bytes(data, key, 1))

        logger.debug(f"Extended encrypt (binary): {len(plaintext)} bytes")
        return _shift_bytes(plaintext, key, 1)

    def decrypt(self, ciphertext: Payload, key: ByteKey) -> Union[str, bytes]:
        """
        Decrypt text or binary data.

        Args:
            ciphertext: A string of byte characters or a bytes-like buffer
            key: The raw byte key

        Returns:
            bytes for binary input; decoded text for string input. Bytes
            that are not valid UTF-8 (wrong key) become U+FFFD.

        Raises:
            ValueError: If a string ciphertext holds characters above U+00FF
        """
        self.check_key(key)
        if isinstance(ciphertext, str):
            data = _shift_bytes(string_bytes(ciphertext), key, -1)
            logger.debug(f"Extended decrypt (text): {len(data)} bytes")
            return data.decode(TEXT_ENCODING, errors='replace')

        logger.debug(f"Extended decrypt (binary): {len(ciphertext)} bytes")
        return _shift_bytes(ciphertext, key, -1)


def extended_encrypt(plaintext: Payload, key: Union[str, bytes]) -> Union[str, bytes]:
    """Convenience function; a string key is encoded as UTF-8."""
    key_material = ByteKey.from_text(key) if isinstance(key, str) else ByteKey(key)
    return ExtendedVigenereCipher().encrypt(plaintext, key_material)


def extended_decrypt(ciphertext: Payload, key: Union[str, bytes]) -> Union[str, bytes]:
    """Convenience function; a string key is encoded as UTF-8."""
    key_material = ByteKey.from_text(key) if isinstance(key, str) else ByteKey(key)
    return ExtendedVigenereCipher().decrypt(ciphertext, key_material)
