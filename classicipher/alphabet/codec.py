"""
Alphabet Codec

This module maps symbols to residues and back. Letter mode covers the
26 uppercase letters A-Z; byte mode is the identity on 0..255 and is
used by the extended Vigenere cipher.
"""

import re
import string
from typing import Iterable, List

from ..modular.arithmetic import mod

LETTER_MODULUS = 26
BYTE_MODULUS = 256

# Padding letter for Playfair digraphs and Hill blocks (residue 23)
PAD_CHAR = 'X'

_NON_LETTERS = re.compile(r'[^A-Z]')


def encode_char(char: str) -> int:
    """
    Map a single letter to its residue (A=0, B=1, ..., Z=25).

    Args:
        char: One ASCII letter, either case

    Returns:
        The residue of the letter

    Raises:
        ValueError: If char is not a single ASCII letter
    """
    if len(char) != 1 or char not in string.ascii_letters:
        raise ValueError(f"Cannot encode {char!r}: expected a single letter A-Z")
    return ord(char.upper()) - ord('A')


def decode_residue(residue: int) -> str:
    """Map a residue back to its uppercase letter."""
    return chr(mod(int(residue), LETTER_MODULUS) + ord('A'))


def normalize(text: str) -> str:
    """
    Uppercase the text and drop everything that is not a letter A-Z.

    Case, spacing and punctuation are lost; the letter ciphers only
    operate on the normalized form.
    """
    return _NON_LETTERS.sub('', text.upper())


def text_to_residues(text: str) -> List[int]:
    """Normalize text and convert it to a list of residues."""
    return [ord(c) - ord('A') for c in normalize(text)]


def residues_to_text(residues: Iterable[int]) -> str:
    """Convert residues back into an uppercase string."""
    return ''.join(decode_residue(r) for r in residues)


def text_to_bytes(text: str, encoding: str = 'utf-8') -> bytes:
    """Encode plaintext for the byte alphabet."""
    return text.encode(encoding)


def byte_string(data: bytes) -> str:
    """
    Render bytes as a string with one character per byte.

    This is the text form of an extended Vigenere ciphertext, which is
    not valid text in any encoding in general.
    """
    return bytes(data).decode('latin-1')


def string_bytes(text: str) -> bytes:
    """
    Inverse of byte_string.

    Raises:
        ValueError: If the string holds a character above U+00FF
    """
    try:
        return text.encode('latin-1')
    except UnicodeEncodeError as e:
        raise ValueError(f"Character {text[e.start]!r} at position {e.start} is outside the byte range")


def format_in_groups(text: str, group_size: int = 5) -> str:
    """
    Split text into space-separated groups of group_size characters.

    Args:
        text: The text to format (usually a ciphertext)
        group_size: Number of characters per group

    Returns:
        The grouped text, e.g. 'LXFOP VEFRN HR'
    """
    if group_size <= 0:
        raise ValueError("Group size must be positive")
    return ' '.join(text[i:i + group_size] for i in range(0, len(text), group_size))
