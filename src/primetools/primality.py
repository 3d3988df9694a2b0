"""Probabilistic primality tests: Miller-Rabin, a Lucas-style witness test, and their Baillie-PSW style composition.

Every randomized function accepts an optional `rng` exposing the `random.Random` interface. If omitted, a fresh
`secrets.SystemRandom` is created for the call, so no generator is ever shared between calls or threads. Supplying a
seeded `random.Random` makes the witness sequence reproducible.

Typical usage example:

    is_prime_rm(561, 5)
    baillie_test(2**61 - 1)
    lucas_test(97, rng=random.Random(7))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import random
import secrets

from primetools import arithmetic
from primetools.errors import InvalidArgument

LUCAS_TRIALS: int = 10
BAILLIE_MR_ROUNDS: int = 2
BAILLIE_SMALL_PRIMES: tuple[int, ...] = tuple(arithmetic.sieve(47))


def _odd_part(n: int) -> int:
    """Divide out every factor of two from `n`, which must be non-zero."""
    while n % 2 == 0:
        n //= 2
    return n


def miller_test(d: int, n: int, rng: random.Random | None = None) -> bool:
    """Run a single Miller-Rabin round against one random witness.

    Draws a witness `a` uniformly from `[2, n-4]` and computes `x = a**d mod n`. The round passes immediately if `x` is
    1 or `n-1`. Otherwise `x` is squared while `d` is doubled up to `n-1`: reaching 1 first exposes a non-trivial square
    root of unity (composite), reaching `n-1` passes the round.

    Args:
        d: The odd part of `n-1`.
        n: Odd integer > 3 to be tested. For `n == 5` the witness range collapses to `{2}`.
        rng: Random source for the witness.

    Returns:
        True if `n` is probably prime for this witness, False if the witness proves it composite.
    """
    if rng is None:
        rng = secrets.SystemRandom()
    a = rng.randint(2, max(2, n - 4))
    x = arithmetic.mod_pow(a, d, n)
    if x == 1 or x == n - 1:
        return True
    while d != n - 1:
        x = (x * x) % n
        d *= 2
        if x == 1:
            return False
        if x == n - 1:
            return True
    return False


def is_prime_rm(n: int, k: int, rng: random.Random | None = None) -> bool:
    """Perform the Miller-Rabin primality test with `k` independent rounds.

    Each round draws a fresh witness, so the verdict for a composite may differ between calls. A composite survives
    all rounds with probability at most 4**-k.

    Args:
        n: The integer to test. Values below 2 are simply reported as not prime.
        k: Number of rounds to perform. Must be >= 1.
        rng: Random source for the witnesses.

    Returns:
        True if `n` is probably prime, False otherwise.

    Raises:
        InvalidArgument: If `k` < 1.
    """
    if k < 1:
        raise InvalidArgument("k must be >= 1")
    if n <= 1 or n == 4:
        return False
    if n <= 3:
        return True
    if rng is None:
        rng = secrets.SystemRandom()
    d = _odd_part(n - 1)
    return all(miller_test(d, n, rng) for _ in range(k))


def lucas_test(n: int, rng: random.Random | None = None, trials: int = LUCAS_TRIALS) -> bool:
    """Lucas-style witness test built on the factorization of `n-1`.

    For up to `trials` random bases `a` in `[2, n-1)`: a failed Fermat check `a**(n-1) != 1 (mod n)` reports composite
    at once. If `a**((n-1)/f) != 1 (mod n)` for every prime factor `f` of `n-1`, then `a` has order `n-1` and `n` is
    reported prime. Running out of trials reports composite, so a prime with few primitive roots can be rejected.

    This is a search for a primitive root layered on Fermat's test, not the strong Lucas sequence test of the
    canonical Baillie-PSW algorithm. Its verdicts are kept as they are.

    Args:
        n: The integer to test.
        rng: Random source for the bases.
        trials: Maximum number of bases to draw. Defaults to `LUCAS_TRIALS`.

    Returns:
        True if a base of order `n-1` was found, False otherwise.
    """
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    if rng is None:
        rng = secrets.SystemRandom()
    factors = arithmetic.prime_factors(n - 1)
    for _ in range(trials):
        a = rng.randint(2, max(2, n - 2))
        if arithmetic.mod_pow(a, n - 1, n) != 1:
            return False
        if not any(arithmetic.mod_pow(a, (n - 1) // f, n) == 1 for f in factors):
            return True
    return False


def baillie_test(num: int, rng: random.Random | None = None, lucas_trials: int = LUCAS_TRIALS) -> bool:
    """Combined primality test: small-prime table, then Miller-Rabin and the Lucas-style test.

    Matches against the primes up to 47 first, which settles every small input and every multiple of them. The
    remaining candidates must pass both `is_prime_rm(num, 2)` and `lucas_test(num)`.

    Args:
        num: The integer to test.
        rng: Random source shared by both probabilistic stages.
        lucas_trials: Passed to `lucas_test()` as `trials`.

    Returns:
        True if `num` is probably prime, False otherwise.
    """
    if num < 2:
        return False
    for prime in BAILLIE_SMALL_PRIMES:
        if num == prime:
            return True
        if num % prime == 0:
            return False
    if rng is None:
        rng = secrets.SystemRandom()
    if not is_prime_rm(num, BAILLIE_MR_ROUNDS, rng):
        return False
    return lucas_test(num, rng, lucas_trials)
