"""Random prime generation of an exact bit length.

Candidates are drawn uniformly from the requested bit range with the top and bottom bits forced, then screened with
Miller-Rabin. The search is bounded so a broken random source surfaces as an error rather than an endless loop.

Typical usage example:

    p = generate_prime(32)
    q = generate_prime(512, rng=random.Random(2025))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import random
import secrets

from primetools import primality
from primetools.errors import InvalidArgument
from primetools.errors import RetriesExhausted

MILLER_RABIN_ROUNDS: int = 50
_ATTEMPTS_PER_BIT: int = 20


def generate_prime(bits: int, rng: random.Random | None = None, max_attempts: int | None = None) -> int:
    """Generate a probable prime of exactly `bits` bits.

    Each candidate is sampled uniformly from `[2**(bits-1), 2**bits - 1]` and OR-ed with the top and bottom bit,
    guaranteeing the bit length and odd parity, then accepted once it passes `MILLER_RABIN_ROUNDS` Miller-Rabin rounds.
    By the prime number theorem roughly `bits * ln(2) / 2` candidates are needed on average.

    Args:
        bits: The bit length of the prime. Must be > 1.
        rng: Random source for candidates and witnesses.
        max_attempts: Number of candidates to try before giving up. Defaults to `bits * 20`.

    Returns:
        A probable prime `p` with `p.bit_length() == bits`.

    Raises:
        InvalidArgument: If `bits` <= 1 or `max_attempts` < 1.
        RetriesExhausted: If no candidate passed within `max_attempts`.
    """
    if bits <= 1:
        raise InvalidArgument("bits must be > 1")
    if max_attempts is None:
        max_attempts = bits * _ATTEMPTS_PER_BIT
    if max_attempts < 1:
        raise InvalidArgument("max_attempts must be >= 1")
    if rng is None:
        rng = secrets.SystemRandom()
    low = 1 << (bits - 1)
    for _ in range(max_attempts):
        candidate = rng.randint(low, (1 << bits) - 1)
        candidate |= low | 1
        if primality.is_prime_rm(candidate, MILLER_RABIN_ROUNDS, rng):
            return candidate
    raise RetriesExhausted(f"Tried {max_attempts} candidates of {bits} bits with no prime found. "
                           "Check the random number generator.")
