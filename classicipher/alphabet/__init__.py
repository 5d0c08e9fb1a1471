"""
Alphabet Package

This package implements the letter and byte alphabets: symbol/residue
mapping, text normalization and output grouping.
"""

from .codec import (
    LETTER_MODULUS,
    BYTE_MODULUS,
    PAD_CHAR,
    encode_char,
    decode_residue,
    normalize,
    text_to_residues,
    residues_to_text,
    text_to_bytes,
    byte_string,
    string_bytes,
    format_in_groups,
)

__all__ = [
    'LETTER_MODULUS',
    'BYTE_MODULUS',
    'PAD_CHAR',
    'encode_char',
    'decode_residue',
    'normalize',
    'text_to_residues',
    'residues_to_text',
    'text_to_bytes',
    'byte_string',
    'string_bytes',
    'format_in_groups',
]
