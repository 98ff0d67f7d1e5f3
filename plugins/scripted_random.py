"""
Deterministic stand-in for RandomSource, shared by the test scripts.
"""


class ScriptedRandom:
    """Replays fixed draws, then returns 0 forever."""

    def __init__(self, steps=(), picks=()):
        self.steps = list(steps)
        self.picks = list(picks)

    def uniform_symmetric(self, r):
        v = self.steps.pop(0) if self.steps else 0
        assert -r <= v <= r, f"scripted draw {v} outside [-{r}, {r}]"
        return v

    def choice_index(self, n):
        v = self.picks.pop(0) if self.picks else 0
        assert 0 <= v < n
        return v
