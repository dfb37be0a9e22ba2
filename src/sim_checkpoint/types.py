# MIT License (see LICENSE)
"""
Body types consumed by the snapshot writers.

Defines:
- SnapshotBody: The capability set every serializable body provides.
- ParticleBody: A reference body holding particle fields as numpy arrays.

The writers in sim_checkpoint.io only compute file paths and call the five
capabilities below; they never touch particle arrays themselves. Any object
with a name and these methods can be checkpointed.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

import numpy as np

from .errors import CorruptSnapshotError
from .io import json_io, xml_io
from .util import f64


# =============================================================================
# Capability Set
# =============================================================================

@runtime_checkable
class SnapshotBody(Protocol):
    """
    A named, independently serializable body.

    Attributes:
        name: Unique body name, embedded in every file name.
        recording_suffix: File extension of recording output, e.g. ".json".
    """
    name: str
    recording_suffix: str

    def write_states_for_recording(self, path: Path) -> None: ...

    def write_particles_for_restart(self, path: Path) -> None: ...

    def read_particles_for_restart(self, path: Path) -> None: ...

    def write_particles_for_reload(self, path: Path) -> None: ...

    def read_particles_for_reload(self, path: Path) -> None: ...


# =============================================================================
# Reference Particle Body
# =============================================================================

@dataclass
class ParticleBody:
    """
    A body made of N particles with named per-particle fields.

    Attributes:
        name: Body name used in snapshot file names.
        position: Particle positions, shape (N, dim), float64.
        variables: Extra per-particle fields (velocity, volume, ids, ...).
                   Every array has leading dimension N.
        recorded_variables: Names included in recording output.
        reload_variables: Names written to reload files alongside Position.
                          Names the body does not hold are skipped.
        recording_suffix: Extension of recording files.

    Note:
        Restart files carry Position and every variable. Reload files carry
        only the particle layout (Position plus reload_variables), so a
        reload may change N; variables missing from the file are then
        reset to zeros with the new particle count.
    """
    name: str
    position: np.ndarray = field(default_factory=lambda: np.zeros((0, 3), dtype=np.float64))
    variables: dict[str, np.ndarray] = field(default_factory=dict)
    recorded_variables: tuple[str, ...] = ()
    reload_variables: tuple[str, ...] = ("Volume",)
    recording_suffix: str = ".json"

    def __post_init__(self) -> None:
        """Validate shapes and normalize position to float64."""
        self.position = f64(self.position)
        if self.position.ndim != 2:
            raise ValueError(f"Position must have shape (N, dim), got {self.position.shape}")
        for name, values in list(self.variables.items()):
            self.add_variable(name, values)

    @property
    def number_of_particles(self) -> int:
        return int(self.position.shape[0])

    @property
    def dimension(self) -> int:
        return int(self.position.shape[1])

    def add_variable(self, name: str, values, record: bool = False) -> None:
        """
        Attach a per-particle field.

        Args:
            name: Field name. "Position" is reserved.
            values: Array-like with leading dimension N.
            record: Also include the field in recording output.
        """
        if name == xml_io.POSITION_FIELD:
            raise ValueError(f"'{name}' is reserved for particle positions")
        arr = np.asarray(values)
        if arr.ndim == 0 or arr.shape[0] != self.number_of_particles:
            raise ValueError(
                f"Variable '{name}' needs leading dimension {self.number_of_particles}, got shape {arr.shape}"
            )
        self.variables[name] = arr
        if record and name not in self.recorded_variables:
            self.recorded_variables = (*self.recorded_variables, name)

    # -------------------------------------------------------------------------
    # Snapshot capabilities
    # -------------------------------------------------------------------------

    def write_states_for_recording(self, path: Path) -> None:
        json_io.save_body_states(self, path)

    def write_particles_for_restart(self, path: Path) -> None:
        xml_io.write_particles(path, self.name, self._fields(self.variables))

    def read_particles_for_restart(self, path: Path) -> None:
        self._assign(path, xml_io.read_particles(path))

    def write_particles_for_reload(self, path: Path) -> None:
        names = [n for n in self.reload_variables if n in self.variables]
        xml_io.write_particles(path, self.name, self._fields(names))

    def read_particles_for_reload(self, path: Path) -> None:
        self._assign(path, xml_io.read_particles(path))

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _fields(self, names) -> dict[str, np.ndarray]:
        fields = {xml_io.POSITION_FIELD: self.position}
        for name in names:
            fields[name] = self.variables[name]
        return fields

    def _assign(self, path: Path, fields: dict[str, np.ndarray]) -> None:
        """Replace body state with the arrays read from `path`."""
        if xml_io.POSITION_FIELD not in fields:
            raise CorruptSnapshotError(path, "missing Position field")
        position = f64(fields.pop(xml_io.POSITION_FIELD))
        if position.ndim != 2:
            raise CorruptSnapshotError(path, f"Position has shape {position.shape}")
        n = position.shape[0]

        variables = {}
        for name, old in self.variables.items():
            if name not in fields:
                variables[name] = old if old.shape[0] == n else np.zeros((n, *old.shape[1:]), dtype=old.dtype)
        variables.update(fields)

        self.position = position
        self.variables = variables
