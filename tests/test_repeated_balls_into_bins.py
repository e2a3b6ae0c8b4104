import random

import pytest

from simulations.common import generate_uniform_vector
from src.repeated_balls.repeated_balls_into_bins import RepeatedBallsIntoBins


def _assert_consistent(rbb: RepeatedBallsIntoBins) -> None:
    loads = rbb.snapshot_load_vector()
    assert rbb.max_load() == max(loads)
    assert rbb.num_empty_bins() == sum(1 for v in loads if v == 0)


def test_construction_scans_statistics() -> None:
    rbb = RepeatedBallsIntoBins([3, 0, 2, 0])
    assert rbb.max_load() == 3
    assert rbb.num_empty_bins() == 2
    assert rbb.snapshot_load_vector() == [3, 0, 2, 0]


def test_construction_copies_input() -> None:
    loads = [1, 2, 3]
    rbb = RepeatedBallsIntoBins(loads)
    loads[0] = 100
    assert rbb.snapshot_load_vector() == [1, 2, 3]


def test_snapshot_is_a_copy() -> None:
    rbb = RepeatedBallsIntoBins([1, 1])
    snap = rbb.snapshot_load_vector()
    snap[0] = 50
    assert rbb.snapshot_load_vector() == [1, 1]
    assert rbb.max_load() == 1


def test_rejects_empty_vector() -> None:
    with pytest.raises(ValueError):
        RepeatedBallsIntoBins([])


def test_rejects_negative_load() -> None:
    with pytest.raises(ValueError):
        RepeatedBallsIntoBins([1, -1])


def test_balls_are_conserved() -> None:
    rng = random.Random(0)
    initial = [7, 0, 0, 3, 1, 0, 12, 2]
    rbb = RepeatedBallsIntoBins(initial)
    for _ in range(500):
        rbb.next_round(rng)
        assert sum(rbb.snapshot_load_vector()) == sum(initial)
        assert min(rbb.snapshot_load_vector()) >= 0


@pytest.mark.parametrize("initial", [
    generate_uniform_vector(50, 50),
    generate_uniform_vector(20, 133),
    [40] + [0] * 19,
    [1] * 30,
])
def test_statistics_match_load_vector(initial) -> None:
    rng = random.Random(123)
    rbb = RepeatedBallsIntoBins(initial)
    for _ in range(300):
        rbb.next_round(rng)
        _assert_consistent(rbb)


def test_same_seed_same_trajectory() -> None:
    initial = generate_uniform_vector(25, 60)
    a = RepeatedBallsIntoBins(initial)
    b = RepeatedBallsIntoBins(initial)
    rng_a = random.Random(2024)
    rng_b = random.Random(2024)
    for _ in range(200):
        a.next_round(rng_a)
        b.next_round(rng_b)
        assert a.snapshot_load_vector() == b.snapshot_load_vector()
        assert a.max_load() == b.max_load()
        assert a.num_empty_bins() == b.num_empty_bins()


def test_all_load_in_one_bin_single_round() -> None:
    n, m = 10, 5
    for seed in range(50):
        rbb = RepeatedBallsIntoBins([m] + [0] * (n - 1))
        rbb.next_round(random.Random(seed))
        loads = rbb.snapshot_load_vector()
        if loads[0] == m:
            # the freed ball landed back in bin 0
            assert rbb.num_empty_bins() == n - 1
        else:
            assert loads[0] == m - 1
            assert rbb.num_empty_bins() == n - 2
        assert sum(loads) == m
        _assert_consistent(rbb)


def test_empty_system_is_fixed_point() -> None:
    rng = random.Random(5)
    rbb = RepeatedBallsIntoBins([0] * 8)
    for _ in range(20):
        rbb.next_round(rng)
        assert rbb.snapshot_load_vector() == [0] * 8
        assert rbb.max_load() == 0
        assert rbb.num_empty_bins() == 8


def test_single_bin_never_changes() -> None:
    rbb = RepeatedBallsIntoBins([4])
    rng = random.Random(1)
    for _ in range(10):
        rbb.next_round(rng)
    assert rbb.snapshot_load_vector() == [4]
    assert rbb.max_load() == 4
    assert rbb.num_empty_bins() == 0
