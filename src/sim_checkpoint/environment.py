# MIT License (see LICENSE)
"""
Folder configuration for snapshot I/O.

IOEnvironment is created once at startup and passed explicitly to the
simulation system; writers read their folders from it and never look up
paths anywhere else.

Environment variables (used by IOEnvironment.from_env):
    SIM_CHECKPOINT_ROOT         Run root, default ".".
    SIM_CHECKPOINT_OUTPUT_DIR   Overrides <root>/output.
    SIM_CHECKPOINT_RESTART_DIR  Overrides <root>/restart.
    SIM_CHECKPOINT_RELOAD_DIR   Overrides <root>/reload.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path

from .constants import DEFAULT_OUTPUT_DIR, DEFAULT_RESTART_DIR, DEFAULT_RELOAD_DIR


@dataclass(frozen=True)
class IOEnvironment:
    """
    Resolved folder paths for one simulation run.

    Attributes:
        state_recording_folder: Destination of periodic recording output.
        restart_folder: Destination and source of restart checkpoint sets.
        reload_folder: Destination and source of particle reload files.
    """
    state_recording_folder: Path
    restart_folder: Path
    reload_folder: Path

    def __post_init__(self) -> None:
        for name in ("state_recording_folder", "restart_folder", "reload_folder"):
            object.__setattr__(self, name, Path(getattr(self, name)))

    @classmethod
    def from_root(cls, root: str | Path = ".") -> "IOEnvironment":
        """Use the default output/, restart/ and reload/ folders below root."""
        root = Path(root)
        return cls(
            state_recording_folder=root / DEFAULT_OUTPUT_DIR,
            restart_folder=root / DEFAULT_RESTART_DIR,
            reload_folder=root / DEFAULT_RELOAD_DIR,
        )

    @classmethod
    def from_env(cls) -> "IOEnvironment":
        """Build from SIM_CHECKPOINT_* environment variables."""
        base = cls.from_root(os.environ.get("SIM_CHECKPOINT_ROOT", "."))
        return cls(
            state_recording_folder=os.environ.get("SIM_CHECKPOINT_OUTPUT_DIR", base.state_recording_folder),
            restart_folder=os.environ.get("SIM_CHECKPOINT_RESTART_DIR", base.restart_folder),
            reload_folder=os.environ.get("SIM_CHECKPOINT_RELOAD_DIR", base.reload_folder),
        )

    def ensure_folders(self) -> None:
        """Create all three folders. Intended for the driver at startup."""
        for folder in (self.state_recording_folder, self.restart_folder, self.reload_folder):
            folder.mkdir(parents=True, exist_ok=True)
