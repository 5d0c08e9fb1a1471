"""
classicipher - Classical Cipher Engine

This library implements a family of classical ciphers over the
26-letter alphabet and the 256-value byte range, together with the
modular arithmetic and matrix algebra they rely on.

Key Features:
- Vigenere, autokey and extended (byte-wise) Vigenere
- Affine cipher with coprimality-checked keys
- Playfair digraph cipher with a 5x5 key square
- Hill cipher with 2x2 and 3x3 key matrices inverted over Z/26Z
- Typed errors for invalid keys and singular matrices
- Command-line front end (python -m classicipher)

These ciphers are of historical and educational interest only; they
offer no protection against modern cryptanalysis.
"""

__version__ = '0.1.0'
__author__ = 'classicipher Team'

from .errors import CipherError, InvalidKey, NotInvertible, UnsupportedOperation, UnsupportedSize
from .keys import LetterKey, ByteKey, AffineKey, HillKey
from .engine import CipherKind, Action, CipherRequest, encrypt, decrypt, process

__all__ = [
    'CipherError', 'InvalidKey', 'NotInvertible', 'UnsupportedOperation', 'UnsupportedSize',
    'LetterKey', 'ByteKey', 'AffineKey', 'HillKey',
    'CipherKind', 'Action', 'CipherRequest', 'encrypt', 'decrypt', 'process',
]
