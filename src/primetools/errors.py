"""Exceptions raised by primetools.

Both concrete errors also derive from the matching built-in, so callers catching `ValueError` or `RuntimeError`
keep working.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class PrimeToolsError(Exception):
    """Base class for every error raised by primetools."""


class InvalidArgument(PrimeToolsError, ValueError):
    """An argument is outside the domain the operation accepts."""


class RetriesExhausted(PrimeToolsError, RuntimeError):
    """A bounded retry loop ran out of attempts without producing a result."""
