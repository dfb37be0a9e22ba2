# MIT License (see LICENSE)
"""
Shared base for snapshot writers and readers.

BaseIO binds a writer to the simulation system, its folder configuration and
a fixed list of bodies. It performs no I/O itself; subclasses use its token
helpers to build file names.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

from ..constants import PAD_WIDTH
from ..naming import convert_physical_time_to_string, pad_value_with_zeros

if TYPE_CHECKING:
    from ..environment import IOEnvironment
    from ..system import SimulationSystem
    from ..types import SnapshotBody


class BaseIO:
    """
    Common state of all snapshot I/O objects.

    Attributes:
        system: The owning simulation system (clock and bodies).
        io_environment: Folder configuration taken from the system.
        bodies: Bodies this object writes or reads, in order.
        pad_width: Minimum token width.
    """

    def __init__(
        self,
        system: "SimulationSystem",
        bodies: "SnapshotBody | Sequence[SnapshotBody] | None" = None,
        pad_width: int = PAD_WIDTH,
    ) -> None:
        """
        Args:
            system: Initialized simulation system.
            bodies: A single body, a list of bodies, or None for every body
                    registered with the system.
            pad_width: Minimum number of digits in file-name tokens.

        Raises:
            ValueError: If the system has no IOEnvironment or no bodies
                        are given.
        """
        if system.io_environment is None:
            raise ValueError("SimulationSystem has no IOEnvironment; create one before any writer")
        self.system = system
        self.io_environment: "IOEnvironment" = system.io_environment
        self.bodies: list["SnapshotBody"] = _as_body_list(system, bodies)
        self.pad_width = pad_width

    def pad_value_with_zeros(self, index: int) -> str:
        return pad_value_with_zeros(index, self.pad_width)

    def convert_physical_time_to_string(self, physical_time: float | None = None) -> str:
        """Token for the given time, or for the system clock when omitted."""
        if physical_time is None:
            physical_time = self.system.physical_time
        return convert_physical_time_to_string(physical_time, self.pad_width)


def _as_body_list(system: "SimulationSystem", bodies) -> list["SnapshotBody"]:
    if bodies is None:
        bodies = list(system.bodies)
    elif hasattr(bodies, "name"):
        bodies = [bodies]
    else:
        bodies = list(bodies)
    if not bodies:
        raise ValueError("Snapshot I/O needs at least one body")
    return bodies
