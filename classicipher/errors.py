"""
Cipher Errors

This module defines the typed failures raised by the cipher engine.
All of them derive from ValueError so callers that only guard against
bad input keep working.
"""

from typing import Optional


class CipherError(ValueError):
    """Base class for every error raised by the cipher engine."""


class InvalidKey(CipherError):
    """Key material fails a required precondition (coprimality, emptiness, shape)."""


class NotInvertible(CipherError):
    """
    A key matrix has no inverse in the ring of residues.

    Attributes:
        determinant: Determinant of the matrix reduced modulo `modulus`
        modulus: Size of the ring the inverse was requested in
    """

    def __init__(self, determinant: int, modulus: int, message: Optional[str] = None):
        self.determinant = determinant
        self.modulus = modulus
        if message is None:
            message = (f"Matrix is not invertible in Z{modulus}: "
                       f"determinant {determinant} shares a factor with {modulus}")
        super().__init__(message)


class UnsupportedOperation(CipherError):
    """The requested operation has no implementation for the given input."""


class UnsupportedSize(UnsupportedOperation):
    """A matrix routine was called for a size without a closed-form formula."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Matrix size {size}x{size} is not supported (only 2x2 and 3x3)")
