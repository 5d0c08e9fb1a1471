"""
Modular Arithmetic

This module implements the residue arithmetic every cipher is built on:
true modulo, greatest common divisor, coprimality and the modular
multiplicative inverse.
"""

import logging

logger = logging.getLogger(__name__)


def mod(n: int, m: int) -> int:
    """
    Reduce n modulo m, always returning a value in [0, m).

    Args:
        n: Any integer, negative values included
        m: The modulus (must be positive)

    Returns:
        The non-negative residue of n modulo m

    Raises:
        ValueError: If m is not positive
    """
    if m <= 0:
        raise ValueError(f"Modulus must be positive, got {m}")
    return ((n % m) + m) % m


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor via the Euclidean algorithm.

    Args:
        a: First operand
        b: Second operand

    Returns:
        The non-negative gcd; gcd(a, 0) == |a|
    """
    while b:
        a, b = b, a % b
    return abs(a)


def is_coprime(a: int, b: int) -> bool:
    """Return True if a and b share no factor other than 1."""
    return gcd(a, b) == 1


def mod_inverse(a: int, m: int) -> int:
    """
    Find the multiplicative inverse of a modulo m by linear search.

    Callers must check is_coprime(a, m) first. When no inverse exists
    the function falls back to 1, which is not a real inverse.

    Args:
        a: The value to invert
        m: The modulus

    Returns:
        x in [1, m) with (a * x) mod m == 1, or 1 if no such x exists
    """
    a = mod(a, m)
    for x in range(1, m):
        if mod(a * x, m) == 1:
            return x

    logger.warning(f"{a} has no inverse modulo {m}; falling back to 1")
    return 1
