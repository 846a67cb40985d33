"""Computer Algebra Utilities, starting from the greatest common divisor.

Provides the Euclidean and extended Euclidean algorithms generically over any Euclidean ring, alongside
integer-specific helpers: Stein's binary GCD, Miller-Rabin primality testing, Montgomery modular arithmetic and
square form factorization.

Typical usage example:

    gcd(34, 55)
    g, x, y = extended_euclidean_algorithm(214654, 312497)
    prime_factorization(600851475143)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from compalg.euclid import binary_gcd
from compalg.euclid import extended_euclidean_algorithm
from compalg.euclid import gcd
from compalg.factorization import prime_factorization
from compalg.factorization import square_form_factorization
from compalg.montgomery import Montgomery
from compalg.primality import check_prime
from compalg.primality import get_small_primes
from compalg.primality import is_prime
from compalg.ring import EuclideanRing
from compalg.ring import INTEGERS
from compalg.ring import OperatorRing
from compalg.ring import ring_of

__version__ = "0.0.1"
__all__ = [
    "gcd",
    "extended_euclidean_algorithm",
    "binary_gcd",
    "EuclideanRing",
    "OperatorRing",
    "INTEGERS",
    "ring_of",
    "get_small_primes",
    "check_prime",
    "is_prime",
    "Montgomery",
    "square_form_factorization",
    "prime_factorization",
]
