# simulations/plot.py

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

import matplotlib.pyplot as plt

from .common import DEFAULT_SEED, SweepResult
from .sweep import SCALE_FACTORS, run_sweep


# Smaller than the full sweep so a figure comes back in minutes, not days.
DEFAULT_BINS = [100, 1_000]
DEFAULT_ROUNDS = 10_000
DEFAULT_REPETITIONS = 1


def plot_sweep(results: List[SweepResult]):
    """
    Average max load and empty-bin fraction against the scale factor,
    one line per bin count.
    """
    fig = plt.figure(figsize=(12, 4))

    ax_load = fig.add_subplot(1, 2, 1)
    ax_empty = fig.add_subplot(1, 2, 2)

    for r in results:
        xs = [s for s, _ in r.max_loads]
        ax_load.plot(xs, [v for _, v in r.max_loads], marker="o", label=f"n={r.bins}")
        xs = [s for s, _ in r.empty_bin_fractions]
        ax_empty.plot(xs, [v for _, v in r.empty_bin_fractions], marker="o", label=f"n={r.bins}")

    ax_load.set_title("Average maximum load")
    ax_load.set_xlabel("m / n")
    ax_load.set_ylabel("Max load")
    ax_load.legend()

    ax_empty.set_title("Average fraction of empty bins")
    ax_empty.set_xlabel("m / n")
    ax_empty.set_ylabel("Empty bins / n")
    ax_empty.legend()

    fig.suptitle("Repeated balls-into-bins, uniform start")
    fig.tight_layout(rect=[0, 0.02, 1, 0.92])
    return fig


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Plot RBB max load and empty-bin fraction against m/n."
    )
    parser.add_argument("--bins", type=int, nargs="+", default=DEFAULT_BINS, help="bin counts to sweep")
    parser.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS, help="rounds per repetition")
    parser.add_argument("--repetitions", type=int, default=DEFAULT_REPETITIONS, help="repetitions per configuration")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="generator seed per configuration")
    parser.add_argument("--output", help="write the figure here instead of showing it")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    results = run_sweep(
        num_bins_all=args.bins,
        scale_factors=SCALE_FACTORS,
        num_rounds=args.rounds,
        num_repetitions=args.repetitions,
        seed=args.seed,
    )

    fig = plot_sweep(results)
    if args.output:
        fig.savefig(args.output)
    else:
        plt.show()

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
