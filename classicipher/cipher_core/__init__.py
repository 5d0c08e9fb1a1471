"""
Cipher Core Package

This package implements the six classical ciphers as strategies
sharing one encrypt/decrypt contract, plus the registry they are
looked up in. Importing the package registers every cipher.
"""

from .base import CipherStrategy, CIPHER_REGISTRY, register_cipher
from .vigenere import VigenereCipher, vigenere_encrypt, vigenere_decrypt
from .autokey import AutokeyCipher, autokey_encrypt, autokey_decrypt
from .extended import ExtendedVigenereCipher, extended_encrypt, extended_decrypt
from .affine import AffineCipher, affine_encrypt, affine_decrypt, affine_mapping
from .playfair import PlayfairCipher, playfair_encrypt, playfair_decrypt, generate_key_square, prepare_text
from .hill import HillCipher, hill_encrypt, hill_decrypt

__all__ = [
    'CipherStrategy', 'CIPHER_REGISTRY', 'register_cipher',
    'VigenereCipher', 'vigenere_encrypt', 'vigenere_decrypt',
    'AutokeyCipher', 'autokey_encrypt', 'autokey_decrypt',
    'ExtendedVigenereCipher', 'extended_encrypt', 'extended_decrypt',
    'AffineCipher', 'affine_encrypt', 'affine_decrypt', 'affine_mapping',
    'PlayfairCipher', 'playfair_encrypt', 'playfair_decrypt', 'generate_key_square', 'prepare_text',
    'HillCipher', 'hill_encrypt', 'hill_decrypt',
]
