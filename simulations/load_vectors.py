# simulations/load_vectors.py

from __future__ import annotations

from typing import Callable, Dict, List

from .common import generate_uniform_vector


VectorFn = Callable[[int, int], List[int]]


def single_bin_vector(num_bins: int, num_balls: int) -> List[int]:
    """
    Worst-case start: every ball sits in bin 0.
    """
    if num_bins <= 0:
        raise ValueError("num_bins must be > 0")
    if num_balls < 0:
        raise ValueError("num_balls must be >= 0")

    load_vector = [0] * num_bins
    load_vector[0] = num_balls
    return load_vector


# --- Registry / dispatch -----------------------------------------------------

def get_policy(name: str) -> VectorFn:
    name = name.strip().lower()
    if name not in POLICIES:
        raise ValueError(f"unknown policy '{name}'. Available: {sorted(POLICIES.keys())}")
    return POLICIES[name]


# POLICIES maps initial load vector policy name -> (num_bins, num_balls) -> vector.
POLICIES: Dict[str, VectorFn] = {
    "uniform": generate_uniform_vector,
    "single_bin": single_bin_vector,
}
