# simulations/sweep.py

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Sequence

from .common import (
    DEFAULT_SEED,
    ExperimentSpec,
    SweepResult,
    format_stats_line,
    format_sweep_result,
)
from .run import run_experiment

log = logging.getLogger(__name__)


# Section 6 of "Tight Bounds for Repeated Balls-Into-Bins":
# n in {10^2, 10^3, 10^4}, m in {n, 4n, ..., 52n}, 10^6 rounds.
NUM_BINS_ALL = (100, 1_000, 10_000)
SCALE_FACTORS = tuple(range(1, 53, 3))
NUM_ROUNDS = 1_000_000
NUM_REPETITIONS = 25


def run_sweep(
    num_bins_all: Iterable[int] = NUM_BINS_ALL,
    scale_factors: Sequence[int] = SCALE_FACTORS,
    num_rounds: int = NUM_ROUNDS,
    num_repetitions: int = NUM_REPETITIONS,
    seed: int = DEFAULT_SEED,
) -> List[SweepResult]:
    """
    Run every (bins, scale_factor) configuration, starting from the
    uniform load vector with scale_factor * bins balls.

    Each configuration gets its own generator seeded with seed.
    """
    results = []
    for num_bins in num_bins_all:
        sweep = SweepResult(bins=num_bins)
        for scale_factor in sorted(scale_factors):
            spec = ExperimentSpec(
                bins=num_bins,
                balls=scale_factor * num_bins,
                rounds=num_rounds,
                repetitions=num_repetitions,
            )
            result = run_experiment(spec, seed=seed)
            log.info(format_stats_line(result))
            sweep.add(scale_factor, result)
        results.append(sweep)
    return results


def run_experiments(
    num_repetitions: int = NUM_REPETITIONS,
    num_bins_all: Iterable[int] = NUM_BINS_ALL,
    num_rounds: int = NUM_ROUNDS,
    seed: int = DEFAULT_SEED,
) -> None:
    """
    Run the sweep (by default with the hardcoded constants) and print each
    bin count's results as soon as it completes.
    """
    for num_bins in num_bins_all:
        (sweep,) = run_sweep(
            num_bins_all=(num_bins,),
            num_rounds=num_rounds,
            num_repetitions=num_repetitions,
            seed=seed,
        )
        print(format_sweep_result(sweep), flush=True)


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Measure the average max load and empty-bin fraction of the RBB process."
    )
    parser.add_argument("--bins", type=int, nargs="+", default=list(NUM_BINS_ALL), help="bin counts to sweep")
    parser.add_argument("--rounds", type=int, default=NUM_ROUNDS, help="rounds per repetition")
    parser.add_argument("--repetitions", type=int, default=NUM_REPETITIONS, help="repetitions per configuration")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="generator seed per configuration")
    parser.add_argument("--verbose", action="store_true", help="log per-configuration progress to stderr")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run_experiments(
        num_repetitions=args.repetitions,
        num_bins_all=args.bins,
        num_rounds=args.rounds,
        seed=args.seed,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
