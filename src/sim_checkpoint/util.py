# MIT License (see LICENSE)
"""
Filesystem and array helpers for snapshot I/O.

A snapshot is never deleted before its replacement exists. Writers produce
the new content under a temporary sibling name, then os.replace() moves it
over the old file in a single rename. A crash at any point leaves either the
old file or the new one at the final path, never neither.
"""
from __future__ import annotations
import os
from pathlib import Path
from typing import Callable

import numpy as np

TEMP_SUFFIX = ".tmp"


def f64(x) -> np.ndarray:
    """Convert any array-like to a float64 numpy array."""
    return np.array(x, dtype=np.float64)


def staging_path(path: str | Path) -> Path:
    """Temporary sibling used while `path` is being written."""
    path = Path(path)
    return path.with_name(f".{path.name}{TEMP_SUFFIX}")


def commit(staged: str | Path, path: str | Path) -> None:
    """Atomically move a staged file to its final path."""
    os.replace(staged, path)


def discard(staged: str | Path) -> None:
    """Remove a staged file if it exists."""
    Path(staged).unlink(missing_ok=True)


def write_atomic(path: str | Path, writer: Callable[[Path], None]) -> None:
    """
    Call writer(temp_path), then rename the result onto `path`.

    If writer raises, the temporary file is removed and `path` is untouched.
    """
    staged = staging_path(path)
    try:
        writer(staged)
    except BaseException:
        discard(staged)
        raise
    commit(staged, path)


def write_text_atomic(path: str | Path, text: str) -> None:
    """Atomically replace `path` with the given text."""
    def _write(tmp: Path) -> None:
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(text)

    write_atomic(path, _write)
