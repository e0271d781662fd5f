"""Shared random source used when callers do not inject their own."""

from __future__ import annotations

import random

__all__ = ["shared_rng"]

_SHARED = random.Random()


def shared_rng() -> random.Random:
    """Return the process-wide :class:`random.Random` instance.

    It is created unseeded and never reset by the library.
    """

    return _SHARED
