"""
Shared Randomness Source

Every stochastic operation in the simulation (walk steps, color
perturbation, axis picks) draws from one RandomSource instance that is
handed to the driver, so a whole run can be reproduced from a seed.
"""

import numpy as np


class RandomSource:
    """Thin wrapper over a numpy Generator with the draws the walkers need."""

    def __init__(self, seed=None):
        """
        Args:
            seed: Integer seed for a reproducible run, None for fresh entropy
        """
        self.seed = seed
        self._gen = np.random.default_rng(seed)

    def reseed(self, seed=None):
        """Restart the stream from a new seed (None = fresh entropy)."""
        self.seed = seed
        self._gen = np.random.default_rng(seed)

    def uniform_symmetric(self, r):
        """Uniform integer on [-r, r], both ends inclusive (2r+1 outcomes).

        r = 0 always returns 0 but still consumes a draw, so the stream
        position does not depend on which factors happen to be zero.
        """
        if r < 0:
            raise ValueError(f"radius must be non-negative, got {r}")
        return int(self._gen.integers(-r, r, endpoint=True))

    def choice_index(self, n):
        """Uniform integer on [0, n)."""
        return int(self._gen.integers(0, n))
