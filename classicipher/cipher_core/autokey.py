"""
Autokey Vigenere Cipher

Vigenere variant whose running key is the primer key followed by the
plaintext itself. Decryption has to rebuild that running key one
recovered letter at a time.
"""

import logging

from ..alphabet.codec import LETTER_MODULUS, normalize, residues_to_text, text_to_residues
from ..keys.material import LetterKey
from ..modular.arithmetic import mod
from .base import CipherStrategy, register_cipher

logger = logging.getLogger(__name__)


@register_cipher
class AutokeyCipher(CipherStrategy):
    """Autokey Vigenere cipher over the 26-letter alphabet."""

    name = "autokey"
    description = "Autokey Vigenere: the plaintext extends the primer key."
    key_type = LetterKey

    def encrypt(self, plaintext: str, key: LetterKey) -> str:
        """
        Encrypt plaintext using the running key K ++ P.

        Args:
            plaintext: The text to encrypt
            key: The primer key

        Returns:
            The ciphertext as uppercase letters
        """
        self.check_key(key)
        plain = text_to_residues(plaintext)
        primer = key.residues
        if not primer or not plain:
            return normalize(plaintext)

        running_key = primer + plain
        logger.debug(f"Autokey encrypt: {len(plain)} letters, primer length {len(primer)}")
        return residues_to_text(mod(p + running_key[i], LETTER_MODULUS) for i, p in enumerate(plain))

    def decrypt(self, ciphertext: str, key: LetterKey) -> str:
        """
        Decrypt ciphertext, feeding each recovered letter back into the key.

        Position i uses the primer for i < |K| and the plaintext letter
        recovered at i - |K| after that, so the loop is strictly in order.

        Args:
            ciphertext: The text to decrypt
            key: The primer key

        Returns:
            The recovered plaintext as uppercase letters
        """
        self.check_key(key)
        cipher = text_to_residues(ciphertext)
        primer = key.residues
        if not primer or not cipher:
            return normalize(ciphertext)

        recovered = []
        for i, c in enumerate(cipher):
            key_value = primer[i] if i < len(primer) else recovered[i - len(primer)]
            recovered.append(mod(c - key_value, LETTER_MODULUS))

        logger.debug(f"Autokey decrypt: {len(recovered)} letters, primer length {len(primer)}")
        return residues_to_text(recovered)


def autokey_encrypt(plaintext: str, key: str) -> str:
    """Convenience function to encrypt text with a string primer key."""
    return AutokeyCipher().encrypt(plaintext, LetterKey(key))


def autokey_decrypt(ciphertext: str, key: str) -> str:
    """Convenience function to decrypt text with a string primer key."""
    return AutokeyCipher().decrypt(ciphertext, LetterKey(key))
