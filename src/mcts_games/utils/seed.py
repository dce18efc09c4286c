"""Random seed management for reproducible searches and matches."""

import random

import numpy as np


def set_seed(seed: int) -> np.random.Generator:
    """Seed Python's and NumPy's global generators.

    Args:
        seed: Random seed

    Returns:
        A fresh numpy Generator seeded with the same value
    """
    random.seed(seed)
    np.random.seed(seed)
    return np.random.default_rng(seed)


def derive_seed(seed: int, offset: int) -> int:
    """Deterministic per-player / per-game seed from a base seed."""
    return seed + offset * 10000
