# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import time


# Default seed of std::mt19937_64.
DEFAULT_SEED = 5489


@dataclass(frozen=True)
class ExperimentSpec:
    """
    Parameters of one (bins, balls) configuration.
    """
    bins: int
    balls: int
    rounds: int
    repetitions: int = 1

    def __post_init__(self) -> None:
        if self.bins <= 0:
            raise ValueError("bins must be > 0")
        if self.balls < 0:
            raise ValueError("balls must be >= 0")
        if self.rounds < 0:
            raise ValueError("rounds must be >= 0")
        if self.repetitions <= 0:
            raise ValueError("repetitions must be > 0")

    @property
    def observations(self) -> int:
        return self.rounds * self.repetitions


@dataclass
class ExperimentResult:
    """
    Averages of the per-round statistics for one configuration.
    """
    spec: ExperimentSpec
    avg_max_load: float
    avg_num_empty_bins: float

    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def empty_bin_fraction(self) -> float:
        return self.avg_num_empty_bins / self.spec.bins


@dataclass
class SweepResult:
    """
    Results for one bin count, as (scale_factor, value) pairs in
    increasing scale-factor order.
    """
    bins: int
    max_loads: List[Tuple[int, float]] = field(default_factory=list)
    empty_bin_fractions: List[Tuple[int, float]] = field(default_factory=list)

    def add(self, scale_factor: int, result: ExperimentResult) -> None:
        self.max_loads.append((scale_factor, result.avg_max_load))
        self.empty_bin_fractions.append((scale_factor, result.empty_bin_fraction))


def generate_uniform_vector(num_bins: int, num_balls: int) -> List[int]:
    """
    Spread num_balls over num_bins as evenly as possible. The first
    num_balls % num_bins bins get one extra ball.
    """
    if num_bins <= 0:
        raise ValueError("num_bins must be > 0")
    if num_balls < 0:
        raise ValueError("num_balls must be >= 0")

    load_vector = [num_balls // num_bins] * num_bins
    for i in range(num_balls % num_bins):
        load_vector[i] += 1
    return load_vector


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.time()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.time() - self._start


def format_pair(scale_factor: int, value: float) -> str:
    return f"({scale_factor}, {value:g})"


def format_sweep_result(result: SweepResult) -> str:
    """
    Render one bin count's block: all max-load pairs, then all
    normalized empty-bin pairs.
    """
    lines = [f"Results for {result.bins} bins:"]
    for scale_factor, avg_max_load in result.max_loads:
        lines.append(format_pair(scale_factor, avg_max_load))
    for scale_factor, fraction in result.empty_bin_fractions:
        lines.append(format_pair(scale_factor, fraction))
    return "\n".join(lines)


def format_stats_line(r: ExperimentResult) -> str:
    """
    Human-friendly one-liner for log output.
    """
    s = r.spec
    return (
        f"n={s.bins}, m={s.balls}: avg_max_load={r.avg_max_load:.3f}, "
        f"empty_fraction={r.empty_bin_fraction:.4f}"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
