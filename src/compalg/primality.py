"""Primality testing: a cached small-prime sieve, trial division and Miller-Rabin.

Numbers below 2**64 are decided deterministically using the first twelve primes as Miller-Rabin witnesses, which is
known to be exact below 3.1 * 10**23. Larger numbers fall back to random witnesses, with the iteration count scaled
on the bit length.

Typical usage example:

    get_small_primes(12000)
    is_prime(2**61 - 1)
    check_prime(2**127 - 1, iters=64)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from collections.abc import Iterable
import secrets

_SMALL_PRIMES: list[int] = []
_SMALL_PRIMES_CAP: int = 0
_DETERMINISTIC_WITNESSES: tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
_DETERMINISTIC_LIMIT: int = 2**64


def _sieve(n: int = 10000) -> list[int]:
    """Implements the Sieve of Eratosthenes over odd numbers only.

    Args:
        n: The number up to which to generate primes. Must be >= 0.

    Returns:
        A list of primes up to `n`, inclusive.
    """
    if n < 2:
        return []
    # Index i stands for 2 * i + 3.
    size = (n - 1) // 2
    candidate = bytearray([1]) * size
    for i in range((int(n**0.5) - 1) // 2):
        if candidate[i]:
            p = 2 * i + 3
            start = (p * p - 3) // 2
            candidate[start::p] = bytes(len(range(start, size, p)))
    return [2] + [2 * i + 3 for i, flag in enumerate(candidate) if flag]


def get_small_primes(n: int = 10000, change: bool = False) -> list[int]:
    """Get the small primes, sieving again only when necessary.

    The module keeps the last sieve in `_SMALL_PRIMES`. It is regenerated when `n` exceeds the cached cap, when
    `change` is set or when the cache is empty.

    Args:
        n: The number up to which to generate primes. Defaults to 10000. Must be >= 0.
        change: Whether to force a recomputation of primes. Defaults to False.

    Returns:
        List of primes in ascending order, covering at least `n` unless `change` is True.

    Raises:
        ValueError: `n` is negative.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    global _SMALL_PRIMES
    global _SMALL_PRIMES_CAP
    if n > _SMALL_PRIMES_CAP or change or not _SMALL_PRIMES:
        _SMALL_PRIMES = _sieve(n)
        _SMALL_PRIMES_CAP = n
    return _SMALL_PRIMES


def _trial_division(no: int, n: int = 10000) -> bool:
    """Check `no` against the known small primes.

    Args:
        no: The number to check. Must be an integer.
        n: Bound for `get_small_primes()`.

    Returns:
        False if `no` cannot be prime, True otherwise.
    """
    if no < 2:
        return False
    for prime in get_small_primes(n):
        if prime * prime > no:
            return True
        if no % prime == 0:
            return False
    return True


def _miller_rabin(w: int, witnesses: Iterable[int]) -> bool:
    """Perform the Miller-Rabin strong probable prime test.

    Args:
        w: Odd integer to be tested.
        witnesses: Bases to test against. Bases that are multiples of `w` are skipped.

    Returns:
        True if `w` is a strong probable prime to every base, False otherwise.
    """
    if w <= 3:
        return w in (2, 3)
    if w % 2 == 0:
        return False
    tw = w - 1
    a = (tw & -tw).bit_length() - 1
    m = tw >> a
    for b in witnesses:
        b %= w
        if b == 0:
            continue
        z = pow(b, m, w)
        if z == 1 or z == tw:
            continue
        for _ in range(1, a):
            z = pow(z, 2, w)
            if z == tw:
                break
            if z == 1:
                return False
        else:
            return False
    return True


def _default_iterations(candidate: int) -> int:
    """Miller-Rabin rounds by bit length, as per FIPS 186-5 Appendix C.1."""
    size = candidate.bit_length()
    if size <= 512:
        return 40
    if size <= 1024:
        return 56
    if size <= 1536:
        return 64
    if size <= 2048:
        return 70
    return 74


def check_prime(candidate: int, iters: int | None = None, n: int = 10000) -> bool:
    """Performs a composite primality test: trial division followed by Miller-Rabin.

    Args:
        candidate: The number to test.
        iters: Number of random Miller-Rabin witnesses. If not provided, numbers below 2**64 use the deterministic
            witness set and larger ones use the FIPS 186-5 defaults.
        n: The number up to which to trial divide. Defaults to 10000.

    Returns:
        True if `candidate` is (probably) prime, False otherwise.
    """
    if candidate < 2:
        return False
    if not _trial_division(candidate, n):
        return False
    if candidate <= n:
        return True
    if iters is None:
        if candidate < _DETERMINISTIC_LIMIT:
            return _miller_rabin(candidate, _DETERMINISTIC_WITNESSES)
        iters = _default_iterations(candidate)
    return _miller_rabin(candidate, (secrets.randbelow(candidate - 3) + 2 for _ in range(iters)))


def is_prime(n: int) -> bool:
    """Tells whether `n` is prime, deterministically below 2**64."""
    return check_prime(n)
