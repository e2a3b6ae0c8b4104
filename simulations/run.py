# simulations/run.py

from __future__ import annotations

import logging
import random
from typing import Optional, Tuple

from .common import DEFAULT_SEED, ExperimentResult, ExperimentSpec, Timer
from .load_vectors import get_policy

from src.repeated_balls.repeated_balls_into_bins import RepeatedBallsIntoBins

log = logging.getLogger(__name__)


def run_experiment(
    spec: ExperimentSpec,
    seed: int = DEFAULT_SEED,
    policy: str = "uniform",
    rng: Optional[random.Random] = None,
) -> ExperimentResult:
    """
    Run the RBB process for one configuration and average the per-round
    statistics.

    Parameters
    ----------
    spec:
        Bins, balls, rounds and repetitions of the configuration.
    seed:
        Seed for the generator shared by all repetitions. Ignored when rng
        is given.
    policy:
        Name of the initial load vector policy ('uniform', 'single_bin').
    rng:
        Optional generator to draw from instead of a freshly seeded one.

    Returns
    -------
    ExperimentResult
    """
    make_vector = get_policy(policy)
    if rng is None:
        rng = random.Random(seed)
        used_seed: Optional[int] = seed
    else:
        used_seed = None

    aggregate_max_loads = 0
    aggregate_num_empty_bins = 0

    with Timer() as t:
        for rep in range(spec.repetitions):
            rbb = RepeatedBallsIntoBins(make_vector(spec.bins, spec.balls))
            for _ in range(spec.rounds):
                rbb.next_round(rng)
                aggregate_max_loads += rbb.max_load()
                aggregate_num_empty_bins += rbb.num_empty_bins()
            log.debug(
                "n=%d m=%d repetition %d/%d done",
                spec.bins, spec.balls, rep + 1, spec.repetitions,
            )

    observations = spec.observations
    if observations == 0:
        avg_max_load = 0.0
        avg_num_empty_bins = 0.0
    else:
        avg_max_load = aggregate_max_loads / observations
        avg_num_empty_bins = aggregate_num_empty_bins / observations

    return ExperimentResult(
        spec=spec,
        avg_max_load=avg_max_load,
        avg_num_empty_bins=avg_num_empty_bins,
        runtime_s=t.elapsed_s,
        meta={"seed": used_seed, "policy": policy},
    )


def run_experiments_for_n_and_m(
    num_bins: int,
    num_balls: int,
    num_rounds: int,
    num_repetitions: int,
    seed: int = DEFAULT_SEED,
    rng: Optional[random.Random] = None,
) -> Tuple[float, float]:
    """
    Convenience helper: run the uniform-start experiment for n bins and
    m balls.

    Returns (avg_max_load, avg_num_empty_bins).
    """
    spec = ExperimentSpec(
        bins=num_bins,
        balls=num_balls,
        rounds=num_rounds,
        repetitions=num_repetitions,
    )
    result = run_experiment(spec, seed=seed, rng=rng)
    return result.avg_max_load, result.avg_num_empty_bins
