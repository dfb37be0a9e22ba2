# MIT License (see LICENSE)
"""
Constants shared by the snapshot writers and readers.

File-name grammar: <folder>/<prefix><token><suffix>, where the token is a
zero-padded decimal index (see naming.py).
"""
from __future__ import annotations

# Minimum number of digits in a snapshot token. Longer indices are kept whole.
PAD_WIDTH: int = 6

# Physical time is quantized to microseconds before it becomes a token.
TIME_RESOLUTION: int = 1_000_000

# Restart set: one overall time file plus one structured file per body.
RESTART_TIME_PREFIX: str = "Restart_time_"
RESTART_TIME_SUFFIX: str = ".dat"
RESTART_BODY_INFIX: str = "_rst_"
RESTART_BODY_SUFFIX: str = ".xml"

# Digits after the decimal point in the restart time file.
RESTART_TIME_DIGITS: int = 9

# Reload set: one unindexed file per body.
RELOAD_BODY_SUFFIX: str = "_rld.xml"

# Default folder names below a run root.
DEFAULT_OUTPUT_DIR: str = "output"
DEFAULT_RESTART_DIR: str = "restart"
DEFAULT_RELOAD_DIR: str = "reload"
