# pylint: disable=protected-access,missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import secrets

import pytest
import sympy

from compalg import factorization
from compalg import primality


def expected_factors(n):
    return sorted(sympy.factorint(n, multiple=True))


@pytest.mark.parametrize("n,expected", [(0, 0), (1, 1), (2, 1), (13, 1), (2**61 - 1, 1), (12, 2), (49, 7),
                                        (1009**2, 1009)])
def test_squfof_special_cases(n, expected):
    assert factorization.square_form_factorization(n) == expected


def test_squfof_concrete():
    assert factorization.square_form_factorization(11111) in (41, 271)


semiprimes = [(1009, 1013), (1013, 7919), (10007, 10009), (10007, 65537), (100003, 100019), (104729, 1299709),
              (999983, 1000003), (1299709, 15485863)]


def test_squfof_semiprimes():
    found = 0
    for p, q in semiprimes:
        f = factorization.square_form_factorization(p * q)
        assert f in (1, p, q)
        found += f != 1
    assert found >= len(semiprimes) - 1


@pytest.mark.parametrize("n", [-5, 0])
def test_prime_factorization_errors(n):
    with pytest.raises(ValueError):
        factorization.prime_factorization(n)


@pytest.mark.parametrize("n,expected", [
    (1, [1]),
    (2, [2]),
    (360, [2, 2, 2, 3, 3, 5]),
    (997 * 997, [997, 997]),
    (2**32 + 1, [641, 6700417]),
    (600851475143, [71, 839, 1471, 6857]),
    (1009**3, [1009, 1009, 1009]),
    (2**61 - 1, [2**61 - 1]),
    (2**64 - 1, [3, 5, 17, 257, 641, 65537, 6700417]),
])
def test_prime_factorization_concrete(n, expected):
    assert factorization.prime_factorization(n) == expected


def test_prime_factorization_random():
    for _ in range(50):
        n = secrets.randbelow(10**12) + 2
        factors = factorization.prime_factorization(n)
        assert factors == expected_factors(n)
        assert math.prod(factors) == n


@pytest.mark.slow
def test_prime_factorization_random_large():
    for _ in range(20):
        n = secrets.randbelow(10**14) + 2
        assert factorization.prime_factorization(n) == expected_factors(n)


@pytest.mark.parametrize("cache_cap", [0, 1000, 10000, 100000])
def test_prime_factorization_trial_fallback(mocker, cache_cap):
    mocker.patch("compalg.primality._SMALL_PRIMES", primality._sieve(cache_cap))
    mocker.patch("compalg.primality._SMALL_PRIMES_CAP", cache_cap)
    mocker.patch("compalg.factorization.square_form_factorization", return_value=1)
    with pytest.warns(RuntimeWarning):
        assert factorization.prime_factorization(1009 * 1013) == [1009, 1013]


@pytest.mark.parametrize("cache_cap", [1000, 10000, 100000])
def test_prime_factorization_trial_stops_at_bound(mocker, cache_cap):
    mocker.patch("compalg.primality._SMALL_PRIMES", primality._sieve(cache_cap))
    mocker.patch("compalg.primality._SMALL_PRIMES_CAP", cache_cap)
    spy = mocker.spy(factorization, "square_form_factorization")
    assert factorization.prime_factorization(3 * 1009 * 1013) == [3, 1009, 1013]
    spy.assert_called_once_with(1009 * 1013)


def test_split_by_trial():
    assert factorization._split_by_trial(1009 * 1013, 1000) == 1009
    assert factorization._split_by_trial(1013, 1000) == 1013
