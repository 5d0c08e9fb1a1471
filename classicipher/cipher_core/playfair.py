"""
Playfair Cipher

Digraph substitution over a 5x5 key square of 25 letters (J is merged
into I). Plaintext is split into pairs; a repeated pair is broken with
an X and an odd tail is padded with X.
"""

import logging
from typing import Dict, List, Tuple

from ..alphabet.codec import PAD_CHAR, normalize
from ..errors import InvalidKey
from ..keys.material import LetterKey
from ..modular.arithmetic import mod
from .base import CipherStrategy, register_cipher

logger = logging.getLogger(__name__)

SQUARE_SIZE = 5
SQUARE_ALPHABET = 'ABCDEFGHIKLMNOPQRSTUVWXYZ'  # no J

KeySquare = Tuple[str, ...]


def _fold_j(text: str) -> str:
    return normalize(text).replace('J', 'I')


def generate_key_square(key: LetterKey) -> KeySquare:
    """
    Build the 5x5 key square from a key.

    Unique key letters come first in order of appearance, followed by
    the rest of the alphabet.

    Args:
        key: The letter key

    Returns:
        Five row strings of five letters each

    Raises:
        InvalidKey: If the key has no letters
    """
    key_letters = _fold_j(key.text)
    if not key_letters:
        raise InvalidKey("Playfair key must contain at least one letter")

    ordered = dict.fromkeys(key_letters + SQUARE_ALPHABET)
    letters = ''.join(ordered)
    return tuple(letters[row * SQUARE_SIZE:(row + 1) * SQUARE_SIZE] for row in range(SQUARE_SIZE))


def prepare_text(text: str) -> List[str]:
    """
    Split plaintext into digraphs.

    Letters are taken two at a time. When both letters of a pair are
    equal, the pair becomes that letter plus X and the second letter
    starts the next pair. A single trailing letter is padded with X.

    Args:
        text: Raw plaintext

    Returns:
        The list of two-letter digraphs, e.g. ['IN', 'ST', ..., 'SX']
    """
    letters = _fold_j(text)
    digraphs = []
    i = 0

    while i < len(letters):
        if i == len(letters) - 1:
            digraphs.append(letters[i] + PAD_CHAR)
            break

        if letters[i] == letters[i + 1]:
            digraphs.append(letters[i] + PAD_CHAR)
            i += 1
        else:
            digraphs.append(letters[i:i + 2])
            i += 2

    return digraphs


def _positions(square: KeySquare) -> Dict[str, Tuple[int, int]]:
    return {letter: (row, col)
            for row, line in enumerate(square)
            for col, letter in enumerate(line)}


def _substitute(digraph: str, square: KeySquare, positions: Dict[str, Tuple[int, int]],
                step: int) -> str:
    """Apply the Playfair rules to one digraph; step is +1 to encrypt, -1 to decrypt."""
    row1, col1 = positions[digraph[0]]
    row2, col2 = positions[digraph[1]]

    if row1 == row2:
        return (square[row1][mod(col1 + step, SQUARE_SIZE)]
                + square[row2][mod(col2 + step, SQUARE_SIZE)])
    if col1 == col2:
        return (square[mod(row1 + step, SQUARE_SIZE)][col1]
                + square[mod(row2 + step, SQUARE_SIZE)][col2])

    # Rectangle: swap columns, keep rows
    return square[row1][col2] + square[row2][col1]


@register_cipher
class PlayfairCipher(CipherStrategy):
    """Playfair digraph cipher with a 5x5 key square."""

    name = "playfair"
    description = "Playfair digraph cipher (5x5 key square, J merged into I)."
    key_type = LetterKey

    def encrypt(self, plaintext: str, key: LetterKey) -> str:
        """
        Encrypt plaintext digraph by digraph.

        Args:
            plaintext: The text to encrypt
            key: The key the square is built from

        Returns:
            The ciphertext (always of even length)
        """
        self.check_key(key)
        square = generate_key_square(key)
        positions = _positions(square)
        digraphs = prepare_text(plaintext)

        logger.debug(f"Playfair encrypt: {len(digraphs)} digraphs")
        return ''.join(_substitute(d, square, positions, 1) for d in digraphs)

    def decrypt(self, ciphertext: str, key: LetterKey) -> str:
        """
        Decrypt ciphertext digraph by digraph.

        The result is the digraph-expanded plaintext: inserted and
        trailing X letters are kept, and J comes back as I.

        Args:
            ciphertext: The text to decrypt
            key: The key the square is built from

        Returns:
            The recovered digraph text
        """
        self.check_key(key)
        square = generate_key_square(key)
        positions = _positions(square)

        letters = _fold_j(ciphertext)
        if len(letters) % 2:
            letters += PAD_CHAR
        digraphs = [letters[i:i + 2] for i in range(0, len(letters), 2)]

        logger.debug(f"Playfair decrypt: {len(digraphs)} digraphs")
        return ''.join(_substitute(d, square, positions, -1) for d in digraphs)


def playfair_encrypt(plaintext: str, key: str) -> str:
    """Convenience function to encrypt text with a string key."""
    return PlayfairCipher().encrypt(plaintext, LetterKey(key))


def playfair_decrypt(ciphertext: str, key: str) -> str:
    """Convenience function to decrypt text with a string key."""
    return PlayfairCipher().decrypt(ciphertext, LetterKey(key))


if __name__ == "__main__":
    key = "MONARCHY"
    plaintext = "INSTRUMENTS"

    print("Key square:")
    for row in generate_key_square(LetterKey(key)):
        print(" ".join(row))

    print(f"Digraphs: {' '.join(prepare_text(plaintext))}")

    ciphertext = playfair_encrypt(plaintext, key)
    print(f"Ciphertext: {ciphertext}")

    decrypted = playfair_decrypt(ciphertext, key)
    print(f"Decrypted: {decrypted}")
    assert decrypted == ''.join(prepare_text(plaintext))

    print("Playfair round trip completed successfully!")
