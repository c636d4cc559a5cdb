import random
import pytest

from src.models.pong import InputSnapshot, Key
from src.pong.pong_game import PongGame


class ScriptedRandom:
    """Entropy source that replays a fixed list of values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randint(self, a, b):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        assert a <= value <= b
        return value


@pytest.fixture()
def scripted():
    return ScriptedRandom


@pytest.fixture()
def seeded_rng():
    return random.Random(1234)


@pytest.fixture()
def no_keys():
    return InputSnapshot()


@pytest.fixture()
def start_key():
    return InputSnapshot.of(Key.START)


@pytest.fixture()
def game(seeded_rng):
    return PongGame(rng=seeded_rng)


@pytest.fixture()
def rally_game(seeded_rng):
    return PongGame(scoring_enabled=False, rng=seeded_rng)
