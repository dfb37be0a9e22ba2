# MIT License (see LICENSE)
"""
Full-state restart checkpoints.

A checkpoint set for iteration step k consists of:
    <restart>/Restart_time_<token>.dat    physical time, "%.9f" text
    <restart>/<body>_rst_<token>.xml      one per body

Writing is staged: every file of the set is first written under a temporary
name, then the body files are renamed into place and the time file last.
The time file therefore marks a committed set. If staging fails, nothing
at that token is replaced.
"""
from __future__ import annotations
import logging
from pathlib import Path

from ..constants import (
    RESTART_BODY_INFIX,
    RESTART_BODY_SUFFIX,
    RESTART_TIME_DIGITS,
    RESTART_TIME_PREFIX,
    RESTART_TIME_SUFFIX,
)
from ..errors import CheckpointWriteError, CorruptSnapshotError, MissingSnapshotError
from ..naming import parse_token, snapshot_path
from ..util import commit, discard, staging_path
from .base import BaseIO

logger = logging.getLogger(__name__)


class RestartIO(BaseIO):
    """
    Write and read restart checkpoint sets.

    Usage:
        restart_io = RestartIO(system)
        if resume_step:
            restart_io.restore(resume_step)
        ...
        if step % restart_interval == 0:
            restart_io.write_to_file(step)
    """

    def __init__(self, system, bodies=None, **kwargs) -> None:
        super().__init__(system, bodies, **kwargs)
        folder = self.io_environment.restart_folder
        self.overall_file_path = folder / RESTART_TIME_PREFIX
        self.file_names = [folder / f"{body.name}{RESTART_BODY_INFIX}" for body in self.bodies]

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    def time_file_path(self, step: int) -> Path:
        token = self.pad_value_with_zeros(step)
        return snapshot_path(self.overall_file_path.parent, self.overall_file_path.name, token, RESTART_TIME_SUFFIX)

    def body_file_paths(self, step: int) -> list[Path]:
        token = self.pad_value_with_zeros(step)
        return [snapshot_path(base.parent, base.name, token, RESTART_BODY_SUFFIX) for base in self.file_names]

    # -------------------------------------------------------------------------
    # Writing
    # -------------------------------------------------------------------------

    def write_to_file(self, iteration_step: int) -> None:
        """
        Write the checkpoint set for `iteration_step`.

        An existing set at the same step is replaced.

        Raises:
            CheckpointWriteError: If any file of the set could not be staged
                                  or renamed into place. A failed rename
                                  leaves the time file uncommitted.
        """
        time_path = self.time_file_path(iteration_step)
        body_paths = self.body_file_paths(iteration_step)

        staged: list[tuple[Path, Path]] = []
        current = time_path
        try:
            tmp = staging_path(time_path)
            staged.append((tmp, time_path))
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(f"{self.system.physical_time:.{RESTART_TIME_DIGITS}f}   \n")

            for body, path in zip(self.bodies, body_paths):
                current = path
                tmp = staging_path(path)
                staged.append((tmp, path))
                body.write_particles_for_restart(tmp)
        except Exception as e:
            for tmp, _ in staged:
                discard(tmp)
            raise CheckpointWriteError(current, str(e)) from e

        # Time file goes last; it marks the set as complete.
        ordered = staged[1:] + staged[:1]
        for i, (tmp, path) in enumerate(ordered):
            try:
                commit(tmp, path)
            except OSError as e:
                for rest, _ in ordered[i:]:
                    discard(rest)
                raise CheckpointWriteError(path, str(e)) from e
            logger.debug("Committed restart file %s", path)

    # -------------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------------

    def read_restart_time(self, restart_step: int) -> float:
        """
        Physical time stored with the checkpoint at `restart_step`.

        Raises:
            MissingSnapshotError: If the time file does not exist.
            CorruptSnapshotError: If it does not start with a number.
        """
        logger.info("Reading restart files from the restart step = %d", restart_step)
        path = self.time_file_path(restart_step)
        if not path.exists():
            raise MissingSnapshotError(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                fields = f.read().split()
        except UnicodeDecodeError as e:
            raise CorruptSnapshotError(path, str(e)) from e
        if not fields:
            raise CorruptSnapshotError(path, "empty time file")
        try:
            return float(fields[0])
        except ValueError as e:
            raise CorruptSnapshotError(path, str(e)) from e

    def read_from_file(self, restart_step: int) -> None:
        """
        Restore every body from the checkpoint at `restart_step`, in order.

        Raises:
            MissingSnapshotError: At the first body whose file is missing.
                                  Bodies before it have already been restored.
        """
        for body, path in zip(self.bodies, self.body_file_paths(restart_step)):
            if not path.exists():
                raise MissingSnapshotError(path)
            body.read_particles_for_restart(path)
            logger.debug("Restored body '%s' from %s", body.name, path)

    def restore(self, restart_step: int) -> float:
        """Read time and bodies for `restart_step` and set the system clock."""
        restart_time = self.read_restart_time(restart_step)
        self.read_from_file(restart_step)
        self.system.physical_time = restart_time
        return restart_time

    # -------------------------------------------------------------------------
    # Discovery
    # -------------------------------------------------------------------------

    def available_steps(self) -> list[int]:
        """Iteration steps with a committed time file, ascending."""
        folder = self.overall_file_path.parent
        if not folder.is_dir():
            return []
        steps = []
        for entry in folder.iterdir():
            step = parse_token(entry.name, RESTART_TIME_PREFIX, RESTART_TIME_SUFFIX)
            if step is not None:
                steps.append(step)
        return sorted(steps)

    def latest_step(self) -> int | None:
        steps = self.available_steps()
        return steps[-1] if steps else None
