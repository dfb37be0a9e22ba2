# MIT License (see LICENSE)
"""
Deterministic snapshot file naming.

Every snapshot file is named <folder>/<prefix><token><suffix>. The token is a
zero-padded decimal index taken either from an iteration counter or from the
physical time quantized to microseconds:

    pad_value_with_zeros(5)                 -> "000005"
    convert_physical_time_to_string(0.25)   -> "250000"
    convert_physical_time_to_string(12.0)   -> "12000000"   (never truncated)

Two physical times inside the same microsecond map to the same token, so a
second recording in that bucket replaces the first.
"""
from __future__ import annotations
import math
import operator
from pathlib import Path

from .constants import PAD_WIDTH, TIME_RESOLUTION


def pad_value_with_zeros(index: int, width: int = PAD_WIDTH) -> str:
    """
    Format a non-negative index as a decimal token of at least `width` digits.

    Raises:
        TypeError: If index is not an integer.
        ValueError: If index is negative.
    """
    index = operator.index(index)
    if index < 0:
        raise ValueError(f"Snapshot index must be non-negative, got {index}")
    return f"{index:0{width}d}"


def physical_time_to_index(physical_time: float) -> int:
    """Quantize a physical time to an integer microsecond index (floor)."""
    if physical_time < 0:
        raise ValueError(f"Physical time must be non-negative, got {physical_time}")
    return math.floor(physical_time * TIME_RESOLUTION)


def convert_physical_time_to_string(physical_time: float, width: int = PAD_WIDTH) -> str:
    """Token for a physical time: quantize, then pad."""
    return pad_value_with_zeros(physical_time_to_index(physical_time), width)


def snapshot_path(folder: str | Path, prefix: str, token: str = "", suffix: str = "") -> Path:
    """Build <folder>/<prefix><token><suffix>."""
    return Path(folder) / f"{prefix}{token}{suffix}"


def parse_token(file_name: str, prefix: str, suffix: str) -> int | None:
    """
    Recover the index from a file name built by snapshot_path().

    Returns None when the name does not follow the grammar for this
    prefix/suffix pair.
    """
    if not (file_name.startswith(prefix) and file_name.endswith(suffix)):
        return None
    token = file_name[len(prefix):len(file_name) - len(suffix)]
    if not (token.isascii() and token.isdigit()):
        return None
    return int(token)
