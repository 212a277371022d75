"""
Seeding utilities.

Dataset generation draws from an explicit ``numpy.random.Generator`` so that
independent generators never share a random stream.
"""

from __future__ import annotations

from typing import Union

import numpy as np

SeedLike = Union[None, int, np.random.Generator]


def create_rng(seed: SeedLike = None) -> np.random.Generator:
    """
    Build a NumPy random generator from a seed-like value.

    Args:
        seed (SeedLike): ``None`` for fresh OS entropy, an integer seed, or an
            existing generator, which is returned unchanged.

    Returns:
        np.random.Generator: Generator to draw samples from.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, (int, np.integer))):
        raise TypeError(f"Seed must be None, an int, or a numpy Generator, got {type(seed).__name__}.")
    return np.random.default_rng(seed)
