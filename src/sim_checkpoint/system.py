# MIT License (see LICENSE)
"""
The simulation system handle seen by the I/O layer.

The physics engine that advances bodies lives elsewhere. Snapshot writers
only need the global clock, the registered bodies and the folder
configuration, which is what SimulationSystem carries.
"""
from __future__ import annotations
from dataclasses import dataclass, field

from .environment import IOEnvironment
from .types import SnapshotBody


@dataclass
class SimulationSystem:
    """
    Process-wide simulation handle.

    Attributes:
        io_environment: Folder configuration for every writer and reader.
        physical_time: Global simulation clock in seconds.
        bodies: Registered bodies, in registration order.
    """
    io_environment: IOEnvironment | None = None
    physical_time: float = 0.0
    bodies: list[SnapshotBody] = field(default_factory=list)

    def add_body(self, body: SnapshotBody) -> SnapshotBody:
        """
        Register a body with the system.

        Raises:
            ValueError: If a body with the same name is already registered.
        """
        if any(b.name == body.name for b in self.bodies):
            raise ValueError(f"Duplicate body name: '{body.name}'")
        self.bodies.append(body)
        return body

    def get_body(self, name: str) -> SnapshotBody:
        """Look up a registered body by name."""
        for body in self.bodies:
            if body.name == name:
                return body
        raise KeyError(name)
