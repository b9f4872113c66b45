"""Shared fixtures. pygame runs headless under the dummy SDL drivers."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from omnisnake.config import ArenaBounds, Config


class FixedRng:
    """Stands in for a numpy Generator; cycles through the given (x, y) points."""

    def __init__(self, *points):
        self.values = [c for p in points for c in p] or [100.0, 900.0]
        self.calls = 0

    def uniform(self, low, high):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def bounds():
    return ArenaBounds(1.0, 999.0, 1.0, 999.0)


@pytest.fixture
def cfg():
    return Config(seed=0, move_interval=0.05, spawn_interval=2.0, turn_rate=180.0,
                  turbo_turn_rate=360.0, growth_per_food=3, segment_radius=5.0, food_radius=5.0)


@pytest.fixture
def fixed_rng():
    """Factory for generators that cycle through fixed (x, y) points."""
    return FixedRng


@pytest.fixture
def far_rng():
    """Food always lands far from the default spawn row."""
    return FixedRng((100.0, 900.0))
