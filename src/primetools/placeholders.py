"""A holding module for building blocks of tests that may be implemented in the future.

Existence of a function in this module means it's a candidate for use by a future primality test, but makes no
guarantee regarding when or whether such use will happen at all. Currently holds the Jacobi symbol, needed by a
strong Lucas probable prime test should one replace `primality.lucas_test`.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from primetools.errors import InvalidArgument


def jacobi_symbol(a: int, n: int) -> int:
    """Computes the Jacobi symbol (a/n).

    Binary algorithm using quadratic reciprocity: strip factors of two from `a` (flipping the sign when n = 3, 5 mod 8),
    then swap the pair (flipping the sign when both are 3 mod 4) and reduce.

    Args:
        a: Any integer.
        n: A positive odd integer.

    Returns:
        -1, 0 or 1. Zero exactly when gcd(a, n) != 1.

    Raises:
        InvalidArgument: If `n` is not a positive odd integer.
    """
    if n <= 0 or n % 2 == 0:
        raise InvalidArgument("n must be a positive odd integer")
    a %= n
    t = 1
    while a != 0:
        while a % 2 == 0:
            a //= 2
            if n % 8 in (3, 5):
                t = -t
        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            t = -t
        a %= n
    return t if n == 1 else 0
