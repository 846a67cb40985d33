"""Greatest common divisors: the Euclidean algorithm, its extended form and Stein's binary variant.

`gcd` and `extended_euclidean_algorithm` are generic over any `EuclideanRing`; when no ring is passed the one matching
the type of the first argument is used. No sign normalization is applied, results follow the remainder convention of
the element type. `binary_gcd` is an integer-only alternative.

Typical usage example:

    gcd(34, 55)
    g, x, y = extended_euclidean_algorithm(45645, 43276)
    binary_gcd(48, 180)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from typing import TypeVar

from compalg.ring import EuclideanRing
from compalg.ring import ring_of

T = TypeVar("T")


def gcd(a: T, b: T, ring: EuclideanRing[T] | None = None) -> T:
    """Computes the greatest common divisor with the Euclidean algorithm.

    Args:
        a: The first element.
        b: The second element.
        ring: Ring providing the arithmetic. Defaults to `ring_of(a)`.

    Returns:
        The last non-zero remainder of the sequence started by `a`, `b`.
    """
    if ring is None:
        ring = ring_of(a)
    while not ring.is_zero(b):
        a = ring.rem(a, b)
        a, b = b, a
    return a


def extended_euclidean_algorithm(a: T, b: T, ring: EuclideanRing[T] | None = None) -> tuple[T, T, T]:
    """Solves a*x + b*y = g where g = gcd(a, b).

    Tracks the Bezout coefficients of both live remainders while running the same remainder loop as `gcd`.

    Args:
        a: The first element.
        b: The second element.
        ring: Ring providing the arithmetic. Defaults to `ring_of(a)`.

    Returns:
        Tuple of (g, x, y).
    """
    if ring is None:
        ring = ring_of(a)
    if ring.is_zero(a):
        return b, ring.zero(), ring.one()
    if ring.is_zero(b):
        return a, ring.one(), ring.zero()
    old_r, old_x, old_y = a, ring.one(), ring.zero()
    now_r, now_x, now_y = b, ring.zero(), ring.one()
    while not ring.is_zero(now_r):
        q = ring.div(old_r, now_r)
        old_r = ring.rem(old_r, now_r)
        old_x = ring.sub(old_x, ring.mul(q, now_x))
        old_y = ring.sub(old_y, ring.mul(q, now_y))
        (old_r, old_x, old_y), (now_r, now_x, now_y) = (now_r, now_x, now_y), (old_r, old_x, old_y)
    return old_r, old_x, old_y


def binary_gcd(a: int, b: int) -> int:
    """Computes the greatest common divisor of two integers with Stein's algorithm.

    Only shifts and subtractions are used past the initial setup. A zero argument returns the other one untouched,
    everything else is computed on absolute values.

    Args:
        a: The first integer.
        b: The second integer.

    Returns:
        Greatest common divisor of `a` and `b`.
    """
    if a == 0:
        return b
    if b == 0:
        return a
    a, b = abs(a), abs(b)
    # Lowest set bits, i.e. the power-of-two parts.
    sa = a & -a
    sb = b & -b
    shift = min(sa, sb)
    a //= sa
    b //= sb
    if a < b:
        a, b = b, a
    while a != b:
        t = a - b
        t >>= (t & -t).bit_length() - 1
        if t > b:
            a = t
        else:
            a, b = b, t
    return shift * a
