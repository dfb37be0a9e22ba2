# MIT License (see LICENSE)
"""
Snapshot writers and readers.

This subpackage provides:
    - BodyStatesRecording: Periodic recording output, one file per body per token.
    - RestartIO: Checkpoint sets (time file + per-body files) for resuming a run.
    - ReloadParticleIO: Unindexed particle layouts reused across runs.
    - xml_io / json_io: File codecs used by the reference ParticleBody.

Typical usage:
    from sim_checkpoint.io import RestartIO

    restart_io = RestartIO(system)
    restart_io.write_to_file(step)
    ...
    restart_io.restore(step)
"""
from .base import BaseIO
from .recording import BodyStatesRecording
from .restart import RestartIO
from .reload import ReloadParticleIO

__all__ = [
    "BaseIO",
    # Writers
    "BodyStatesRecording",
    "RestartIO",
    "ReloadParticleIO",
]
