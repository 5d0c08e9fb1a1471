"""
Vigenere Cipher

Standard Vigenere cipher over the 26-letter alphabet. Each letter is
shifted by the matching letter of the repeating key.
"""

import logging
from typing import List

from ..alphabet.codec import LETTER_MODULUS, residues_to_text, text_to_residues
from ..keys.material import LetterKey
from ..modular.arithmetic import mod
from .base import CipherStrategy, register_cipher

logger = logging.getLogger(__name__)


@register_cipher
class VigenereCipher(CipherStrategy):
    """
    Vigenere cipher: C[i] = (P[i] + K[i mod |K|]) mod 26.

    Input text is normalized first, so case and punctuation are lost.
    A key with no letters leaves the normalized text unchanged.
    """

    name = "vigenere"
    description = "Standard Vigenere cipher over the 26-letter alphabet."
    key_type = LetterKey

    def _shift(self, residues: List[int], key: LetterKey, direction: int) -> List[int]:
        key_residues = key.residues
        if not key_residues:
            return residues

        period = len(key_residues)
        return [mod(r + direction * key_residues[i % period], LETTER_MODULUS)
                for i, r in enumerate(residues)]

    def encrypt(self, plaintext: str, key: LetterKey) -> str:
        """
        Encrypt plaintext with the Vigenere cipher.

        Args:
            plaintext: The text to encrypt
            key: The letter key

        Returns:
            The ciphertext as uppercase letters
        """
        self.check_key(key)
        residues = text_to_residues(plaintext)
        logger.debug(f"Vigenere encrypt: {len(residues)} letters, key period {len(key.letters)}")
        return residues_to_text(self._shift(residues, key, 1))

    def decrypt(self, ciphertext: str, key: LetterKey) -> str:
        """
        Decrypt ciphertext produced by the Vigenere cipher.

        Args:
            ciphertext: The text to decrypt
            key: The letter key

        Returns:
            The recovered plaintext as uppercase letters
        """
        self.check_key(key)
        residues = text_to_residues(ciphertext)
        logger.debug(f"Vigenere decrypt: {len(residues)} letters, key period {len(key.letters)}")
        return residues_to_text(self._shift(residues, key, -1))


def vigenere_encrypt(plaintext: str, key: str) -> str:
    """Convenience function to encrypt text with a string key."""
    return VigenereCipher().encrypt(plaintext, LetterKey(key))


def vigenere_decrypt(ciphertext: str, key: str) -> str:
    """Convenience function to decrypt text with a string key."""
    return VigenereCipher().decrypt(ciphertext, LetterKey(key))
