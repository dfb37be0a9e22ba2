# MIT License (see LICENSE)
"""
Exceptions raised by the snapshot I/O layer.

None of these terminate the process. The driver decides whether a missing
restart set is fatal or whether a failed recording write can be skipped.
"""
from __future__ import annotations
from pathlib import Path


class CheckpointError(Exception):
    """Base class for snapshot I/O failures."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class MissingSnapshotError(CheckpointError, FileNotFoundError):
    """A read targeted a snapshot file that does not exist."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"the input file: {path} does not exist", path)


class CorruptSnapshotError(CheckpointError, ValueError):
    """A snapshot file exists but its content cannot be parsed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"cannot parse snapshot {path}: {reason}", path)


class CheckpointWriteError(CheckpointError, OSError):
    """Staging a snapshot file failed; nothing at that token was replaced."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"failed to write snapshot {path}: {reason}", path)
