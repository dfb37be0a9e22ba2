# MIT License (see LICENSE)
"""
JSON serialization of body states for recording output.

Recording files are meant for plotting and post-processing, not for
restarting; they hold only the fields a body has marked for recording.

JSON Schema Overview:
---------------------
{
  "body": string,                  # Body name
  "particles": int,                # Particle count N
  "dimension": int,                # Spatial dimension of Position
  "position": [[x, y(, z)], ...],  # N rows
  "variables": {                   # Recorded fields only, may be empty
    "<name>": [...]                # N scalars or N rows
  }
}
"""
from __future__ import annotations
import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np

from ..errors import CorruptSnapshotError

if TYPE_CHECKING:
    from ..types import ParticleBody


def body_states_to_json(body: "ParticleBody") -> dict[str, Any]:
    """Serialize a body's position and recorded variables to a dictionary."""
    return {
        "body": body.name,
        "particles": body.number_of_particles,
        "dimension": body.dimension,
        "position": _to_list(body.position),
        "variables": {
            name: _to_list(body.variables[name])
            for name in body.recorded_variables
            if name in body.variables
        },
    }


def save_body_states(body: "ParticleBody", path: str | Path, indent: int = 2) -> None:
    """Write a body's recording JSON to disk."""
    data = body_states_to_json(body)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)


def load_body_states_raw(path: str | Path) -> dict[str, Any]:
    """
    Load a recording file as plain data.

    Raises:
        CorruptSnapshotError: If the file is not valid JSON.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise CorruptSnapshotError(path, str(e)) from e


def _to_list(arr: Any) -> list:
    """Helper: Convert numpy array or tuple to a plain list."""
    if isinstance(arr, np.ndarray):
        return arr.tolist()
    return list(arr)
