"""
Key Package

This package implements the typed key material accepted by the ciphers
and helpers that generate random keys for each cipher family.
"""

from .material import LetterKey, ByteKey, AffineKey, HillKey
from .generation import (
    AFFINE_MULTIPLIERS,
    generate_letter_key,
    generate_byte_key,
    generate_affine_key,
    generate_hill_key,
)

__all__ = [
    'LetterKey',
    'ByteKey',
    'AffineKey',
    'HillKey',
    'AFFINE_MULTIPLIERS',
    'generate_letter_key',
    'generate_byte_key',
    'generate_affine_key',
    'generate_hill_key',
]
