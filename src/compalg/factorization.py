"""Integer factorization with Shanks' square form factorization (SQUFOF).

Small prime factors are stripped with trial division first, whatever is left is split with SQUFOF under a series of
square-free multipliers and every piece is checked with `is_prime` until only primes remain.

Typical usage example:

    square_form_factorization(11111)
    prime_factorization(2**32 + 1)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import warnings

from compalg.euclid import gcd
from compalg.primality import get_small_primes
from compalg.primality import is_prime

_MULTIPLIERS: tuple[int, ...] = (
    1, 3, 5, 7, 11, 3 * 5, 3 * 7, 3 * 11, 5 * 7, 5 * 11, 7 * 11, 3 * 5 * 7, 3 * 5 * 11, 3 * 7 * 11, 5 * 7 * 11,
    3 * 5 * 7 * 11,
)
_TRIAL_BOUND: int = 1000


def _squfof_with_multiplier(n: int, k: int, limit: int) -> int:
    """Run a single SQUFOF attempt on `k * n`.

    Args:
        n: Odd composite, not a perfect square.
        k: Square-free multiplier.
        limit: Iteration cap for each of the forward and backward cycles.

    Returns:
        A divisor of `n`, 1 on failure.
    """
    kn = k * n
    p0 = math.isqrt(kn)
    q_prev, q = 1, kn - p0 * p0
    if q == 0:
        return 1
    p_prev = p = p0
    # Forward cycle, looking for a square Q on an even step.
    for i in range(2, limit):
        b = (p0 + p) // q
        p = b * q - p
        q, q_prev = q_prev + b * (p_prev - p), q
        r = math.isqrt(q)
        if i % 2 == 0 and r * r == q:
            break
        p_prev = p
    else:
        return 1
    # Backward cycle from the square root of the form, until P repeats.
    b = (p0 - p) // r
    p_prev = p = b * r + p
    q_prev, q = r, (kn - p * p) // r
    for _ in range(limit):
        b = (p0 + p) // q
        p_prev, p = p, b * q - p
        q, q_prev = q_prev + b * (p_prev - p), q
        if p == p_prev:
            break
    else:
        return 1
    return gcd(n, q_prev)


def square_form_factorization(n: int) -> int:
    """Finds a divisor of `n` with Shanks' square form factorization.

    Args:
        n: Non-negative integer to split.

    Returns:
        A non-trivial divisor of `n` when one is found. `n` itself for 0, 1 for 1 and primes, 2 for even numbers and
        the square root for perfect squares. 1 if every multiplier fails.
    """
    if n < 2:
        return n
    if is_prime(n):
        return 1
    if n % 2 == 0:
        return 2
    sn = math.isqrt(n)
    if sn * sn == n:
        return sn
    limit = 3 * 2 * math.isqrt(2 * sn)
    for k in _MULTIPLIERS:
        f = _squfof_with_multiplier(n, k, limit)
        if 1 < f < n:
            return f
    return 1


def _split_by_trial(n: int, start: int) -> int:
    """Smallest odd divisor of `n` from `start` up, `n` itself if none."""
    for d in range(start | 1, math.isqrt(n) + 1, 2):
        if n % d == 0:
            return d
    return n


def _factor_large(n: int) -> list[int]:
    """Factors `n`, which has no prime factor below `_TRIAL_BOUND`, into sorted primes."""
    if n == 1:
        return []
    if is_prime(n):
        return [n]
    f = square_form_factorization(n)
    if f == 1:
        warnings.warn(f"SQUFOF failed to split {n}, falling back to trial division.", RuntimeWarning)
        f = _split_by_trial(n, _TRIAL_BOUND)
    return sorted(_factor_large(f) + _factor_large(n // f))


def prime_factorization(n: int) -> list[int]:
    """Decomposes `n` into its prime factors.

    Args:
        n: Positive integer to factor.

    Returns:
        Prime factors of `n` in ascending order, repeated by multiplicity. `[1]` for 1.

    Raises:
        ValueError: `n` is not positive.
    """
    if n < 1:
        raise ValueError("n must be >= 1")
    if n == 1:
        return [1]
    factors = []
    # The cache may hold primes past the bound, stop at the bound regardless.
    for prime in get_small_primes(_TRIAL_BOUND):
        if prime >= _TRIAL_BOUND or prime * prime > n:
            break
        while n % prime == 0:
            factors.append(prime)
            n //= prime
    if n == 1:
        return factors
    if n < _TRIAL_BOUND**2:
        return factors + [n]
    return factors + _factor_large(n)
