"""
Random Key Generation

This module draws random key material for each cipher family using the
pycryptodomex random source.
"""

import logging
import string

from Cryptodome.Random import get_random_bytes
from Cryptodome.Random import random as crypto_random

from ..alphabet.codec import LETTER_MODULUS
from ..errors import NotInvertible, UnsupportedSize
from ..matrix.algebra import SUPPORTED_SIZES, determinant
from ..modular.arithmetic import gcd, is_coprime, mod
from .material import AffineKey, ByteKey, HillKey, LetterKey

logger = logging.getLogger(__name__)

# Units of Z/26Z: the only valid affine multipliers
AFFINE_MULTIPLIERS = tuple(a for a in range(1, LETTER_MODULUS) if is_coprime(a, LETTER_MODULUS))

DEFAULT_HILL_ATTEMPTS = 1000


def generate_letter_key(length: int = 8) -> LetterKey:
    """
    Generate a random uppercase letter key.

    Args:
        length: Number of letters in the key

    Returns:
        A random LetterKey
    """
    if length <= 0:
        raise ValueError("Key length must be positive")
    return LetterKey(''.join(crypto_random.choice(string.ascii_uppercase) for _ in range(length)))


def generate_byte_key(length: int = 16) -> ByteKey:
    """
    Generate a random byte key for the extended Vigenere cipher.

    Args:
        length: Number of bytes in the key

    Returns:
        A random ByteKey
    """
    if length <= 0:
        raise ValueError("Key length must be positive")
    return ByteKey(get_random_bytes(length))


def generate_affine_key() -> AffineKey:
    """Generate a random valid affine key (a coprime with 26, b in [0, 26))."""
    a = crypto_random.choice(AFFINE_MULTIPLIERS)
    b = crypto_random.randint(0, LETTER_MODULUS - 1)
    return AffineKey(a, b)


def generate_hill_key(size: int = 2, max_attempts: int = DEFAULT_HILL_ATTEMPTS) -> HillKey:
    """
    Generate a random Hill key matrix that is invertible modulo 26.

    Matrices are drawn uniformly and rejected until one has a
    determinant coprime with 26.

    Args:
        size: Matrix size (2 or 3)
        max_attempts: Number of draws before giving up

    Returns:
        An invertible HillKey

    Raises:
        UnsupportedSize: If size is not 2 or 3
        NotInvertible: If no invertible matrix was found within max_attempts
    """
    if size <= 0 or max_attempts <= 0:
        raise ValueError("Size and max_attempts must be positive")
    if size not in SUPPORTED_SIZES:
        raise UnsupportedSize(size)

    det = 0
    for attempt in range(1, max_attempts + 1):
        matrix = [[crypto_random.randint(0, LETTER_MODULUS - 1) for _ in range(size)]
                  for _ in range(size)]
        det = mod(determinant(matrix), LETTER_MODULUS)
        if gcd(det, LETTER_MODULUS) == 1:
            logger.debug(f"Found invertible {size}x{size} key after {attempt} attempt(s)")
            return HillKey(matrix)

    logger.warning(f"No invertible {size}x{size} matrix found in {max_attempts} attempts")
    raise NotInvertible(det, LETTER_MODULUS,
                        f"Could not draw an invertible {size}x{size} matrix in {max_attempts} attempts")
