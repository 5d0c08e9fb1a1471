"""
Matrix Algebra Package

This package implements the numpy-backed matrix routines over Z/nZ
used by the Hill cipher.
"""

from .algebra import (
    SUPPORTED_SIZES,
    as_square_matrix,
    determinant,
    adjugate,
    matrix_inverse_mod,
    multiply_matrix_vector,
)

__all__ = [
    'SUPPORTED_SIZES',
    'as_square_matrix',
    'determinant',
    'adjugate',
    'matrix_inverse_mod',
    'multiply_matrix_vector',
]
