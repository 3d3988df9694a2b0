"""Primality Testing and Modular Exponentiation Utilities.

Provides random prime generation of an exact bit length, Miller-Rabin and Baillie-PSW style primality tests, fast
modular exponentiation and textual encodings for its results.

Typical usage example:

    p = generate_prime(32)
    baillie_test(p)
    is_prime_rm(561, 5)
    convert_output(mod_pow(2, 10, 1000), "base64")
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from primetools.arithmetic import mod_pow
from primetools.arithmetic import prime_factors
from primetools.errors import InvalidArgument
from primetools.errors import PrimeToolsError
from primetools.errors import RetriesExhausted
from primetools.formatting import convert_output
from primetools.formatting import parse_output
from primetools.keygen import generate_prime
from primetools.primality import baillie_test
from primetools.primality import is_prime_rm
from primetools.primality import lucas_test

__version__ = "0.0.1"
__all__ = [
    "mod_pow",
    "prime_factors",
    "is_prime_rm",
    "lucas_test",
    "baillie_test",
    "generate_prime",
    "convert_output",
    "parse_output",
    "PrimeToolsError",
    "InvalidArgument",
    "RetriesExhausted",
]
