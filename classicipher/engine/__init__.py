"""
Engine Package

This package implements the dispatch layer that routes a cipher
request to the matching strategy.
"""

from .dispatch import (
    CipherKind,
    Action,
    KEY_TYPES,
    CipherRequest,
    get_cipher,
    coerce_key,
    process,
    encrypt,
    decrypt,
    format_output,
)

__all__ = [
    'CipherKind',
    'Action',
    'KEY_TYPES',
    'CipherRequest',
    'get_cipher',
    'coerce_key',
    'process',
    'encrypt',
    'decrypt',
    'format_output',
]
