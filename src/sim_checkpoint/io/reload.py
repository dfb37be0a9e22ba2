# MIT License (see LICENSE)
"""
Particle layout reload files.

A reload file holds the canonical particle distribution of one body, for
instance a relaxed layout produced by a pre-processing run. Files are not
indexed: each write replaces <reload>/<name>_rld.xml.
"""
from __future__ import annotations
import logging
from pathlib import Path

from ..constants import RELOAD_BODY_SUFFIX
from ..errors import MissingSnapshotError
from ..naming import snapshot_path
from ..util import write_atomic
from .base import BaseIO

logger = logging.getLogger(__name__)


class ReloadParticleIO(BaseIO):
    """
    Write and read unindexed particle reload files.

    A single-body instance may use a file name other than the body name,
    so a layout generated under one label can seed a body with another:

        ReloadParticleIO(system, relaxed_body, given_name="Ashape").write_to_file()
        ReloadParticleIO(system, fresh_body, given_name="Ashape").read_from_file()
    """

    def __init__(self, system, bodies=None, given_name: str | None = None, **kwargs) -> None:
        super().__init__(system, bodies, **kwargs)
        if given_name is not None and len(self.bodies) != 1:
            raise ValueError("given_name requires exactly one body")
        folder = self.io_environment.reload_folder
        names = [given_name] if given_name is not None else [body.name for body in self.bodies]
        self.file_names: list[Path] = [snapshot_path(folder, name, suffix=RELOAD_BODY_SUFFIX) for name in names]

    def write_to_file(self, iteration_step: int = 0) -> None:
        """Replace each body's reload file. `iteration_step` is not used."""
        for body, path in zip(self.bodies, self.file_names):
            write_atomic(path, body.write_particles_for_reload)
            logger.debug("Wrote reload file %s", path)

    def read_from_file(self, restart_step: int = 0) -> None:
        """
        Load each body's particle layout. `restart_step` is not used.

        Raises:
            MissingSnapshotError: If a body's reload file does not exist.
        """
        logger.info("Reloading particles from files.")
        for body, path in zip(self.bodies, self.file_names):
            if not path.exists():
                raise MissingSnapshotError(path)
            body.read_particles_for_reload(path)
