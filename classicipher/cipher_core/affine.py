"""
Affine Cipher

Each letter x is mapped to (a*x + b) mod 26. Decryption multiplies by
the inverse of a, so a must be coprime with 26.
"""

import logging
from typing import Tuple

from ..alphabet.codec import LETTER_MODULUS, residues_to_text, text_to_residues
from ..keys.material import AffineKey
from ..modular.arithmetic import mod
from .base import CipherStrategy, register_cipher

logger = logging.getLogger(__name__)


@register_cipher
class AffineCipher(CipherStrategy):
    """Affine cipher E(x) = (a*x + b) mod 26."""

    name = "affine"
    description = "Affine cipher (a*x + b) mod 26; a must be coprime with 26."
    key_type = AffineKey

    def encrypt(self, plaintext: str, key: AffineKey) -> str:
        """
        Encrypt plaintext with the affine map.

        Args:
            plaintext: The text to encrypt
            key: The (a, b) key pair, already checked for coprimality

        Returns:
            The ciphertext as uppercase letters
        """
        self.check_key(key)
        return residues_to_text(mod(key.a * p + key.shift, LETTER_MODULUS)
                                for p in text_to_residues(plaintext))

    def decrypt(self, ciphertext: str, key: AffineKey) -> str:
        """
        Decrypt ciphertext with D(y) = a^-1 * (y - b) mod 26.

        Args:
            ciphertext: The text to decrypt
            key: The (a, b) key pair

        Returns:
            The recovered plaintext as uppercase letters
        """
        self.check_key(key)
        a_inverse = key.a_inverse
        logger.debug(f"Affine decrypt with a^-1 = {a_inverse}")
        return residues_to_text(mod(a_inverse * (c - key.shift), LETTER_MODULUS)
                                for c in text_to_residues(ciphertext))


def affine_encrypt(plaintext: str, a: int, b: int) -> str:
    """
    Convenience function to encrypt with an (a, b) pair.

    Raises:
        InvalidKey: If a is not coprime with 26
    """
    return AffineCipher().encrypt(plaintext, AffineKey(a, b))


def affine_decrypt(ciphertext: str, a: int, b: int) -> str:
    """
    Convenience function to decrypt with an (a, b) pair.

    Raises:
        InvalidKey: If a is not coprime with 26
    """
    return AffineCipher().decrypt(ciphertext, AffineKey(a, b))


def affine_mapping(key: AffineKey) -> Tuple[str, str]:
    """
    Substitution table for a key: the plain alphabet and its image.

    Returns:
        (plain_alphabet, cipher_alphabet)
    """
    plain = residues_to_text(range(LETTER_MODULUS))
    return plain, AffineCipher().encrypt(plain, key)
