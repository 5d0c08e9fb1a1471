"""
Matrix Algebra over Z/nZ

This module provides the matrix routines needed by the Hill cipher:
closed-form determinants and adjugates for 2x2 and 3x3 matrices, the
inverse of a matrix modulo n, and matrix-vector products modulo n.
"""

import logging
import numpy as np
from typing import List, Optional, Sequence, Union

from ..errors import InvalidKey, NotInvertible, UnsupportedSize
from ..modular.arithmetic import mod, gcd, mod_inverse

logger = logging.getLogger(__name__)

MatrixLike = Union[np.ndarray, Sequence[Sequence[int]]]

# Sizes with a closed-form determinant and adjugate
SUPPORTED_SIZES = (2, 3)


# 64-bit bounds for entries handed to numpy
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def _integer_rows(matrix: MatrixLike) -> List[List[int]]:
    """
    Validate a square integer matrix and return its rows as Python ints.

    The entries are unbounded; nothing is truncated to a machine type.

    Raises:
        InvalidKey: If the input is empty, ragged, non-integer or not square
    """
    try:
        array = np.array(matrix, dtype=object)
    except ValueError as e:
        raise InvalidKey(f"Matrix rows must all have the same length: {e}")

    if array.ndim != 2 or array.size == 0:
        raise InvalidKey("Matrix must be a non-empty two-dimensional array")
    if array.shape[0] != array.shape[1]:
        raise InvalidKey(f"Matrix must be square, got {array.shape[0]}x{array.shape[1]}")

    rows = []
    for row in array.tolist():
        for value in row:
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
                raise InvalidKey("Matrix entries must be integers")
        rows.append([int(value) for value in row])
    return rows


def as_square_matrix(matrix: MatrixLike, modulus: Optional[int] = None) -> np.ndarray:
    """
    Convert nested integer sequences into a square int64 array.

    Args:
        matrix: Rows of integers, or a 2-D numpy array
        modulus: If given, every entry is reduced into [0, modulus) before
            conversion, so entries of any size are accepted

    Returns:
        The matrix as a numpy array of dtype int64

    Raises:
        InvalidKey: If the input is empty, ragged, non-integer or not square,
            or an unreduced entry does not fit in 64 bits
    """
    rows = _integer_rows(matrix)
    if modulus is not None:
        rows = [[mod(value, modulus) for value in row] for row in rows]

    if any(not INT64_MIN <= value <= INT64_MAX for row in rows for value in row):
        raise InvalidKey("Matrix entries exceed the 64-bit range; reduce them modulo n first")

    return np.array(rows, dtype=np.int64)


def determinant(matrix: MatrixLike) -> int:
    """
    Compute the determinant of a 2x2 or 3x3 matrix by cofactor expansion.

    Args:
        matrix: The square matrix

    Returns:
        The exact determinant as a Python int

    Raises:
        UnsupportedSize: If the matrix is not 2x2 or 3x3
    """
    m = _integer_rows(matrix)
    size = len(m)

    if size == 2:
        return m[0][0] * m[1][1] - m[0][1] * m[1][0]
    if size == 3:
        return (m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
                - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
                + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0]))

    raise UnsupportedSize(size)


def adjugate(matrix: MatrixLike) -> np.ndarray:
    """
    Compute the adjugate (transpose of the cofactor matrix).

    Args:
        matrix: A 2x2 or 3x3 matrix

    Returns:
        The adjugate as an int64 array of the same shape

    Raises:
        UnsupportedSize: If the matrix is not 2x2 or 3x3
    """
    m = _integer_rows(matrix)
    size = len(m)

    if size == 2:
        adj = [
            [m[1][1], -m[0][1]],
            [-m[1][0], m[0][0]]
        ]
    elif size == 3:
        adj = [[0] * 3 for _ in range(3)]

        adj[0][0] = m[1][1] * m[2][2] - m[1][2] * m[2][1]
        adj[0][1] = -(m[0][1] * m[2][2] - m[0][2] * m[2][1])
        adj[0][2] = m[0][1] * m[1][2] - m[0][2] * m[1][1]

        adj[1][0] = -(m[1][0] * m[2][2] - m[1][2] * m[2][0])
        adj[1][1] = m[0][0] * m[2][2] - m[0][2] * m[2][0]
        adj[1][2] = -(m[0][0] * m[1][2] - m[0][2] * m[1][0])

        adj[2][0] = m[1][0] * m[2][1] - m[1][1] * m[2][0]
        adj[2][1] = -(m[0][0] * m[2][1] - m[0][1] * m[2][0])
        adj[2][2] = m[0][0] * m[1][1] - m[0][1] * m[1][0]
    else:
        raise UnsupportedSize(size)

    return as_square_matrix(adj)


def matrix_inverse_mod(matrix: MatrixLike, modulus: int) -> np.ndarray:
    """
    Invert a 2x2 or 3x3 matrix in Z/nZ using the adjugate formula.

    The matrix is reduced modulo n first; det and adjugate commute with
    that reduction, and it keeps intermediate products small.

    Args:
        matrix: The square matrix to invert
        modulus: Size of the ring (26 for the letter alphabet)

    Returns:
        The inverse matrix with every entry in [0, modulus)

    Raises:
        NotInvertible: If gcd(det, modulus) != 1
        UnsupportedSize: If the matrix is not 2x2 or 3x3
    """
    reduced = as_square_matrix(matrix, modulus)

    det = mod(determinant(reduced), modulus)
    if gcd(det, modulus) != 1:
        raise NotInvertible(det, modulus)

    det_inv = mod_inverse(det, modulus)
    logger.debug(f"Inverting {len(reduced)}x{len(reduced)} matrix: det={det}, det_inv={det_inv}")

    return np.mod(adjugate(reduced) * det_inv, modulus)


def multiply_matrix_vector(matrix: MatrixLike, vector: Sequence[int], modulus: int) -> np.ndarray:
    """
    Multiply a matrix by a column vector, reducing the result modulo n.

    Args:
        matrix: Square matrix of size k
        vector: Sequence of k residues
        modulus: Size of the ring

    Returns:
        The product vector with entries in [0, modulus)
    """
    m = as_square_matrix(matrix, modulus)
    v = np.asarray(vector, dtype=np.int64)

    if v.shape != (m.shape[0],):
        raise ValueError(f"Vector length {v.size} does not match matrix size {m.shape[0]}")

    return np.mod(m @ v, modulus)
