import datetime as dt

import pytest

from flappy_remix.game.storage import MemoryStorage


class FixedRng:
    """random.Random stand-in: constant draws, first choice, no shuffle."""

    def __init__(self, value=0.5):
        self.value = value
        self.shuffles = 0

    def random(self):
        return self.value

    def choice(self, seq):
        return seq[0]

    def shuffle(self, seq):
        self.shuffles += 1


class Clock:
    def __init__(self, day=dt.date(2024, 3, 1)):
        self.day = day

    def __call__(self):
        return self.day

    def advance(self, days=1):
        self.day = self.day + dt.timedelta(days=days)


@pytest.fixture
def rng():
    return FixedRng()


@pytest.fixture
def clock():
    return Clock()


@pytest.fixture
def storage(clock):
    return MemoryStorage(today=clock)
