# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest
import sympy

from primetools import placeholders
from primetools.errors import InvalidArgument


@pytest.mark.parametrize("n", range(3, 60, 2))
def test_jacobi_symbol_matches_sympy(n):
    for a in range(0, 2 * n):
        assert placeholders.jacobi_symbol(a, n) == sympy.jacobi_symbol(a, n)


@pytest.mark.parametrize("a,n,expected", [(1001, 9907, -1), (19, 45, 1), (8, 21, -1), (5, 21, 1), (21, 21, 0)])
def test_jacobi_symbol_concrete(a, n, expected):
    assert placeholders.jacobi_symbol(a, n) == expected


def test_jacobi_symbol_negative_a():
    assert placeholders.jacobi_symbol(-1, 7) == placeholders.jacobi_symbol(6, 7) == -1


@pytest.mark.parametrize("n", [0, -3, 4, 100])
def test_jacobi_symbol_validates(n):
    with pytest.raises(InvalidArgument):
        placeholders.jacobi_symbol(3, n)
