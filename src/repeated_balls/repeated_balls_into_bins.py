import random
from typing import List, Sequence


class RepeatedBallsIntoBins:
    """
    RepeatedBallsIntoBins (RBB process)

    Starts from an arbitrary load vector with n bins and m balls. In each
    round:

      1. One ball is removed from every non-empty bin.
      2. The removed balls are allocated independently and uniformly at
         random to the n bins.

    The process was introduced in "Self-Stabilizing Repeated Balls-into-Bins"
    (Becchetti, Clementi, Natale, Pasquale, Posta, 2015).

    The maximum load and the number of empty bins are maintained
    incrementally, so a round costs O(n) with no rescans.

    This code is:
      - single-threaded
      - not thread-safe
    """

    def __init__(self, load_vector: Sequence[int]):
        if len(load_vector) == 0:
            raise ValueError("load_vector must be non-empty")

        self.load_vector: List[int] = list(load_vector)
        self._max_load = 0
        self._num_empty_bins = 0

        for load in self.load_vector:
            if load < 0:
                raise ValueError("loads must be >= 0")
            if load > self._max_load:
                self._max_load = load
            if load == 0:
                self._num_empty_bins += 1

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def next_round(self, rng: random.Random) -> None:
        """
        Perform one round of the process, drawing bins from rng.
        """
        loads = self.load_vector
        n = len(loads)

        # Phase 1: remove one ball from each non-empty bin
        balls_to_allocate = n - self._num_empty_bins
        max_load = 0
        num_empty_bins = 0
        for i in range(n):
            load = loads[i]
            if load > 0:
                load -= 1
                loads[i] = load
            if load > max_load:
                max_load = load
            if load == 0:
                num_empty_bins += 1

        # Phase 2: allocate the removed balls uniformly at random
        for _ in range(balls_to_allocate):
            i = rng.randrange(n)
            load = loads[i] + 1
            loads[i] = load
            if load > max_load:
                max_load = load
            if load == 1:
                num_empty_bins -= 1

        self._max_load = max_load
        self._num_empty_bins = num_empty_bins

    # ------------------------------------------------------------
    # Introspection (read-only)
    # ------------------------------------------------------------

    def max_load(self) -> int:
        return self._max_load

    def num_empty_bins(self) -> int:
        return self._num_empty_bins

    def snapshot_load_vector(self) -> List[int]:
        """
        Return a copy of the current load vector for inspection/debugging.
        """
        return list(self.load_vector)
