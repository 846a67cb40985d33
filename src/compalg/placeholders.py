"""Compatibility aliases under short names.

Each function here forwards to its implementation elsewhere in the package and warns that the long name is the one to
use.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import warnings

from compalg.euclid import extended_euclidean_algorithm


def eea(a: int, b: int) -> tuple[int, int, int]:
    """Short alias of `compalg.euclid.extended_euclidean_algorithm`, issuing a `DeprecationWarning`.

    Args:
        a: The first integer.
        b: The second integer.

    Returns:
        Tuple of (gcd, x, y) such that a*x + b*y = gcd.
    """
    warnings.warn("placeholders.eea is deprecated, use compalg.extended_euclidean_algorithm instead.",
                  DeprecationWarning,
                  stacklevel=2)
    return extended_euclidean_algorithm(a, b)
