import pytest

from pong_state import MatchState, Settings


class FixedRng:
    """Stand-in for random.Random: randrange always returns the same value."""

    def __init__(self, value=0):
        self.value = value
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        return min(self.value, n - 1)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def rng():
    # randrange(90) -> 45 gives a flat (0 degree) serve
    return FixedRng(45)


@pytest.fixture
def state(settings, rng):
    return MatchState(settings, rng)
