import os

# roda sem janela nem áudio
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy.simulation import Simulation
from flappy.storage import parse_int


class FixedRandom:
    """Substitui random.Random com um valor fixo."""
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


class MemoryStore:
    """Mesma interface do HighScoreStore, sem disco."""
    def __init__(self, initial=None):
        self.data = dict(initial or {})

    def get(self, key):
        return parse_int(self.data.get(key))

    def set(self, key, value):
        self.data[key] = int(value)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def sim(store):
    s = Simulation(store, rng=FixedRandom(0.5))
    s.start()
    return s
