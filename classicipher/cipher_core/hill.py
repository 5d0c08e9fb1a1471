"""
Hill Cipher

Block cipher over the 26-letter alphabet: each block of n letters is a
vector multiplied by an n x n key matrix modulo 26. Decryption uses the
inverse matrix in Z/26Z, available for 2x2 and 3x3 keys.
"""

import logging
from typing import List, Sequence

from ..alphabet.codec import LETTER_MODULUS, PAD_CHAR, encode_char, residues_to_text, text_to_residues
from ..errors import UnsupportedOperation, UnsupportedSize
from ..keys.material import HillKey
from ..matrix.algebra import MatrixLike, multiply_matrix_vector
from .base import CipherStrategy, register_cipher

logger = logging.getLogger(__name__)

PAD_RESIDUE = encode_char(PAD_CHAR)  # 23


def text_to_blocks(text: str, size: int) -> List[List[int]]:
    """
    Convert text to residue blocks of the given size, padding with X.

    Args:
        text: Raw text (normalized here)
        size: Block size (the key matrix size)

    Returns:
        List of blocks, each a list of `size` residues
    """
    residues = text_to_residues(text)
    while len(residues) % size != 0:
        residues.append(PAD_RESIDUE)
    return [residues[i:i + size] for i in range(0, len(residues), size)]


def _apply(matrix: MatrixLike, blocks: Sequence[Sequence[int]]) -> str:
    return ''.join(residues_to_text(multiply_matrix_vector(matrix, block, LETTER_MODULUS))
                   for block in blocks)


@register_cipher
class HillCipher(CipherStrategy):
    """Hill cipher with a square key matrix."""

    name = "hill"
    description = "Hill block cipher with a 2x2 or 3x3 key matrix mod 26."
    key_type = HillKey

    def encrypt(self, plaintext: str, key: HillKey) -> str:
        """
        Encrypt plaintext block by block: c = M . p mod 26.

        Args:
            plaintext: The text to encrypt
            key: The key matrix

        Returns:
            The ciphertext, padded with X to a multiple of the block size
        """
        self.check_key(key)
        blocks = text_to_blocks(plaintext, key.size)
        logger.debug(f"Hill encrypt: {len(blocks)} block(s) of size {key.size}")
        return _apply(key.matrix, blocks)

    def decrypt(self, ciphertext: str, key: HillKey) -> str:
        """
        Decrypt ciphertext block by block: p = M^-1 . c mod 26.

        Args:
            ciphertext: The text to decrypt
            key: The key matrix

        Returns:
            The recovered plaintext (padding X letters are kept)

        Raises:
            NotInvertible: If the key matrix has no inverse modulo 26
            UnsupportedOperation: If the key is not 2x2 or 3x3
        """
        self.check_key(key)
        try:
            inverse = key.inverse(LETTER_MODULUS)
        except UnsupportedSize as e:
            raise UnsupportedOperation(f"Hill decryption is not implemented for this key: {e}")

        blocks = text_to_blocks(ciphertext, key.size)
        logger.debug(f"Hill decrypt: {len(blocks)} block(s) of size {key.size}")
        return _apply(inverse, blocks)


def hill_encrypt(plaintext: str, matrix: MatrixLike) -> str:
    """Convenience function to encrypt with a key matrix."""
    return HillCipher().encrypt(plaintext, HillKey(matrix))


def hill_decrypt(ciphertext: str, matrix: MatrixLike) -> str:
    """Convenience function to decrypt with a key matrix."""
    return HillCipher().decrypt(ciphertext, HillKey(matrix))


if __name__ == "__main__":
    key = HillKey([[3, 3], [2, 5]])
    print("Key matrix:")
    print(key.as_array())
    print("Inverse key matrix:")
    print(key.inverse())

    ciphertext = hill_encrypt("HELP", key.matrix)
    print(f"Ciphertext: {ciphertext}")

    decrypted = hill_decrypt(ciphertext, key.matrix)
    print(f"Decrypted: {decrypted}")
    assert decrypted == "HELP"

    # Singular key must be rejected
    try:
        hill_decrypt(ciphertext, [[2, 4], [6, 8]])
        print("ERROR: Singular key not detected!")
    except ValueError as e:
        print(f"Correctly rejected singular key: {e}")

    print("Hill cipher tests completed successfully!")
