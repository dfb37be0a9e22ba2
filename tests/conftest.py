"""Pytest fixtures for sim_checkpoint tests."""

import numpy as np
import pytest

from sim_checkpoint.environment import IOEnvironment
from sim_checkpoint.system import SimulationSystem
from sim_checkpoint.types import ParticleBody


def make_body(name: str, n: int = 4, seed: int = 0) -> ParticleBody:
    """Body with random 3D positions, velocities, volumes and integer ids."""
    rng = np.random.default_rng(seed)
    body = ParticleBody(name, position=rng.random((n, 3)))
    body.add_variable("Velocity", rng.normal(size=(n, 3)), record=True)
    body.add_variable("Volume", np.full(n, 0.125))
    body.add_variable("ParticleID", np.arange(n, dtype=np.int64))
    return body


@pytest.fixture
def env(tmp_path):
    environment = IOEnvironment.from_root(tmp_path)
    environment.ensure_folders()
    return environment


@pytest.fixture
def system(env):
    sim = SimulationSystem(io_environment=env)
    sim.add_body(make_body("A", n=4, seed=1))
    sim.add_body(make_body("B", n=6, seed=2))
    return sim


@pytest.fixture
def body_factory():
    return make_body
