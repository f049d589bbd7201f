"""
Random Sources
==============

Distributions do not own their entropy. A sampler borrows a
:class:`RandomSource` for the duration of a single draw: either the one
attached to the distribution or the process-wide default returned by
:func:`default_random_source`.

Notes
-----
- :class:`numpy.random.Generator` satisfies :class:`RandomSource`.
- Sources are not synchronised. Callers sharing one source between threads
  must serialise access themselves.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache
from typing import Protocol, runtime_checkable

import numpy as np

_default_seed: int | None = None


@runtime_checkable
class RandomSource(Protocol):
    """Pseudo-random generator producing standard normal and uniform deviates."""

    def standard_normal(self) -> float: ...

    def random(self) -> float: ...


@lru_cache(maxsize=1)
def default_random_source() -> np.random.Generator:
    """
    Return the process-wide random source.

    The generator is created lazily on first use and reused afterwards.

    Returns
    -------
    numpy.random.Generator
        Shared default generator.
    """
    return np.random.default_rng(_default_seed)


def reset_default_random_source(seed: int | None = None) -> None:
    """
    Drop the cached default source.

    Parameters
    ----------
    seed : int, optional
        Seed of the generator built by the next :func:`default_random_source`
        call. ``None`` draws fresh OS entropy.
    """
    global _default_seed
    _default_seed = seed
    default_random_source.cache_clear()


__all__ = [
    "RandomSource",
    "default_random_source",
    "reset_default_random_source",
]
