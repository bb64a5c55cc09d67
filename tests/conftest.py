import random

import pytest

from eyegrid.config import Config
from eyegrid.field.eye_pair import EyePair
from eyegrid.simulation import Simulation


@pytest.fixture
def config():
    cfg = Config()
    cfg.eyes.num_pairs = 6
    return cfg


@pytest.fixture
def rng():
    return random.Random(1234)


def make_sim(config, pairs=None, seed=0):
    """Simulation with an optional hand-placed field."""
    sim = Simulation(config, now=0.0, rng=random.Random(seed))
    if pairs is not None:
        sim.field = pairs
    return sim


def pair_at(x, y, eye_size=60.0):
    return EyePair(x=x, y=y, eye_size=eye_size, pupil_size=eye_size * 0.4)
