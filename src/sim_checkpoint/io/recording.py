# MIT License (see LICENSE)
"""
Periodic recording of body states for visualization and analysis.

Each call writes one file per body named <name>_<token><suffix> into the
state recording folder. Files of earlier tokens are kept, so the folder
accumulates a time series. There is no reader: recordings are consumed by
external tools.
"""
from __future__ import annotations
import logging
from pathlib import Path

from ..naming import snapshot_path
from ..util import write_atomic
from .base import BaseIO

logger = logging.getLogger(__name__)


class BodyStatesRecording(BaseIO):
    """
    Write the recordable state of a set of bodies.

    Usage:
        recording = BodyStatesRecording(system)
        for step in range(n_steps):
            advance(system)
            if step % 100 == 0:
                recording.write_to_file()        # token from physical time
        recording.write_to_file(n_steps)         # token from iteration step
    """

    def write_to_file(self, iteration_step: int | None = None) -> list[Path]:
        """
        Record every body at the current state.

        Args:
            iteration_step: Use this iteration number as the token. When
                            None, the token comes from the physical time.

        Returns:
            Paths of the files written, in body order.
        """
        if iteration_step is None:
            token = self.convert_physical_time_to_string()
        else:
            token = self.pad_value_with_zeros(iteration_step)
        return self.write_with_file_name(token)

    def write_with_file_name(self, token: str) -> list[Path]:
        """Write each body's recording file for an already formatted token."""
        folder = self.io_environment.state_recording_folder
        written = []
        for body in self.bodies:
            path = snapshot_path(folder, f"{body.name}_", token, body.recording_suffix)
            write_atomic(path, body.write_states_for_recording)
            logger.debug("Recorded body '%s' to %s", body.name, path)
            written.append(path)
        return written
