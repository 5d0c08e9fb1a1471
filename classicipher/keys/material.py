"""
Key Material

This module defines the immutable key objects consumed by the ciphers.
Each object is built fresh from caller input and validates its own
algebraic preconditions at construction time.
"""

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from ..alphabet.codec import LETTER_MODULUS, normalize, text_to_residues
from ..errors import InvalidKey
from ..matrix.algebra import as_square_matrix, matrix_inverse_mod
from ..modular.arithmetic import gcd, mod, mod_inverse


@dataclass(frozen=True)
class LetterKey:
    """Key for the Vigenere, autokey and Playfair ciphers."""
    text: str

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise InvalidKey(f"Letter key must be a string, got {type(self.text).__name__}")

    @property
    def letters(self) -> str:
        """The key reduced to uppercase letters A-Z."""
        return normalize(self.text)

    @property
    def residues(self) -> List[int]:
        return text_to_residues(self.text)

    def __bool__(self) -> bool:
        return bool(self.letters)


@dataclass(frozen=True)
class ByteKey:
    """Raw byte key for the extended Vigenere cipher. Never normalized."""
    data: bytes

    def __post_init__(self):
        if not isinstance(self.data, (bytes, bytearray)):
            raise InvalidKey(f"Byte key must be bytes, got {type(self.data).__name__}")
        object.__setattr__(self, 'data', bytes(self.data))

    @classmethod
    def from_text(cls, text: str, encoding: str = 'utf-8') -> 'ByteKey':
        """Build a byte key from a text key."""
        return cls(text.encode(encoding))

    def __bool__(self) -> bool:
        return bool(self.data)


@dataclass(frozen=True)
class AffineKey:
    """
    Key pair (a, b) for the affine cipher.

    a must be invertible modulo 26; b is reduced modulo 26 on use.
    """
    a: int
    b: int

    def __post_init__(self):
        for name in ('a', 'b'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidKey(f"Affine parameter '{name}' must be an integer")
            object.__setattr__(self, name, int(value))

        if gcd(self.a, LETTER_MODULUS) != 1:
            raise InvalidKey(
                f"Parameter 'a' must be coprime with {LETTER_MODULUS}, got {self.a}. "
                "Valid values: 1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25"
            )

    @property
    def a_inverse(self) -> int:
        return mod_inverse(self.a, LETTER_MODULUS)

    @property
    def shift(self) -> int:
        return mod(self.b, LETTER_MODULUS)


@dataclass(frozen=True)
class HillKey:
    """
    Square integer matrix key for the Hill cipher.

    The matrix is stored as a tuple of row tuples so the key stays
    hashable and cannot be mutated after construction. Entries may be
    any integers and are stored reduced modulo 26.
    """
    matrix: Tuple[Tuple[int, ...], ...]

    def __post_init__(self):
        rows = as_square_matrix(self.matrix, LETTER_MODULUS).tolist()
        object.__setattr__(self, 'matrix', tuple(tuple(row) for row in rows))

    @property
    def size(self) -> int:
        return len(self.matrix)

    def as_array(self) -> np.ndarray:
        return np.array(self.matrix, dtype=np.int64)

    def inverse(self, modulus: int = LETTER_MODULUS) -> np.ndarray:
        """
        Inverse of the key matrix in Z/nZ.

        Raises:
            NotInvertible: If the matrix is singular modulo n
            UnsupportedSize: If the size has no closed-form inverse
        """
        return matrix_inverse_mod(self.matrix, modulus)
