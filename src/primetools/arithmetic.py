"""Integer arithmetic underpinning the primality tests: modular exponentiation, factorization and sieving.

Everything here is pure and deterministic. Python integers are arbitrary precision, so intermediate products
never overflow regardless of the size of the modulus.

Typical usage example:

    mod_pow(2, 10, 1000)
    prime_factors(28)
    sieve(47)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import warnings

from primetools.errors import InvalidArgument

_FACTOR_WARN_BITS: int = 64


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Compute `base**exponent % modulus` by binary (square-and-multiply) exponentiation.

    The exponent is halved each step, the base squared and folded into the accumulator on odd bits, reducing modulo
    `modulus` after every multiplication to bound the magnitude.

    Args:
        base: The base. Negative values are reduced into `[0, modulus)` first.
        exponent: The exponent. Must be >= 0.
        modulus: The modulus. Must be > 0.

    Returns:
        The residue in `[0, modulus)`. Note that a modulus of 1 always yields 0, even for a zero exponent.

    Raises:
        InvalidArgument: If `modulus` is not positive or `exponent` is negative.
    """
    if modulus <= 0:
        raise InvalidArgument("modulus must be > 0")
    if exponent < 0:
        raise InvalidArgument("exponent must be >= 0")
    result = 1 % modulus
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result


def prime_factors(n: int) -> list[int]:
    """Factor `n` by trial division.

    Strips the factors of two, then divides by every odd `i` while `i * i` does not exceed the remaining cofactor.
    Whatever is left above 2 afterwards is a prime and is appended last. Runs in O(sqrt(n)) for the worst case, which
    is only acceptable for moderately sized inputs.

    Args:
        n: The integer to factor. Must be >= 1.

    Returns:
        The prime factors in ascending order, with multiplicity. Empty for `n == 1`.

    Raises:
        InvalidArgument: If `n` < 1.
    """
    if n < 1:
        raise InvalidArgument("n must be >= 1")
    if n.bit_length() > _FACTOR_WARN_BITS:
        warnings.warn(f"Trial division of a {n.bit_length()}-bit integer may not finish in reasonable time.",
                      RuntimeWarning)
    factors: list[int] = []
    while n % 2 == 0:
        factors.append(2)
        n //= 2
    i = 3
    while i * i <= n:
        while n % i == 0:
            factors.append(i)
            n //= i
        i += 2
    if n > 2:
        factors.append(n)
    return factors


def sieve(n: int) -> list[int]:
    """Implements the Sieve of Eratosthenes.

    Odd-only sieve, crossing out from `r*r` and stopping at the root of `n`.

    Args:
        n: The number up to which to generate primes, inclusive.

    Returns:
        A list of primes up to `n`.
    """
    if n < 2:
        return []
    i_size = (n - 1) // 2
    candidate: list[bool] = [True] * i_size
    for i in range(int(n**0.5) // 2):
        if candidate[i]:
            r = 2 * i + 3
            for j in range((r * r - 3) // 2, i_size, r):
                candidate[j] = False
    return [2] + [(no * 2 + 3) for no, ele in enumerate(candidate) if ele]
