# MIT License (see LICENSE)
"""
sim_checkpoint - Snapshot, restart and reload I/O for particle simulations.

This package names, sequences and replaces the files that hold the state of
simulated bodies. The bodies serialize themselves; the writers here decide
where and when.

Main entry points:
    - SimulationSystem: Global clock, registered bodies and folder configuration.
    - IOEnvironment: Recording, restart and reload folders.
    - BodyStatesRecording: Periodic output indexed by time or iteration.
    - RestartIO: Checkpoint sets for resuming an interrupted run.
    - ReloadParticleIO: Reusable particle layouts.
    - ParticleBody: Reference body with numpy particle fields.

Submodules:
    - io: Writers, readers and file codecs.
    - naming: Token and file-name construction.
    - errors: MissingSnapshotError and friends.

Example:
    from sim_checkpoint import IOEnvironment, SimulationSystem, ParticleBody, RestartIO

    system = SimulationSystem(io_environment=IOEnvironment.from_root("run"))
    system.io_environment.ensure_folders()
    system.add_body(ParticleBody("Water", position=[[0.0, 0.0], [0.5, 0.0]]))
    RestartIO(system).write_to_file(100)
"""
from .types import ParticleBody, SnapshotBody
from .environment import IOEnvironment
from .system import SimulationSystem
from .errors import (
    CheckpointError,
    CheckpointWriteError,
    CorruptSnapshotError,
    MissingSnapshotError,
)
from .io import BodyStatesRecording, RestartIO, ReloadParticleIO

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # System
    "SimulationSystem",
    "IOEnvironment",
    # Bodies
    "SnapshotBody",
    "ParticleBody",
    # Writers
    "BodyStatesRecording",
    "RestartIO",
    "ReloadParticleIO",
    # Errors
    "CheckpointError",
    "MissingSnapshotError",
    "CorruptSnapshotError",
    "CheckpointWriteError",
]
