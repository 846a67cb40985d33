# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest

from compalg import placeholders
from compalg.euclid import extended_euclidean_algorithm


@pytest.mark.parametrize("a,b", [(5, 8), (21465, 31497), (0, 4)])
def test_eea_proxy(a, b):
    with pytest.warns(DeprecationWarning):
        g, x, y = placeholders.eea(a, b)
    assert (g, x, y) == extended_euclidean_algorithm(a, b)
    assert a * x + b * y == g
