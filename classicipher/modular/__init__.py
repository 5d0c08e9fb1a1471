"""
Modular Arithmetic Package

This package implements arithmetic in the ring of residues modulo n
used by all ciphers: true modulo, gcd, coprimality and inverses.
"""

from .arithmetic import mod, gcd, is_coprime, mod_inverse

__all__ = ['mod', 'gcd', 'is_coprime', 'mod_inverse']
