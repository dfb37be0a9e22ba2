# MIT License (see LICENSE)
"""
XML serialization of particle fields for restart and reload files.

The format stores one header <field> element per array and one <particle>
element per particle. Float values are written with repr(), which is the
shortest text that parses back to the identical float64, so a restart file
reproduces the particle state bit for bit.

XML Layout:
-----------
<particles body="Tank" count="2">
  <field name="Position" dtype="float64" shape="2" />
  <field name="Volume" dtype="float64" shape="" />
  <particle Position="0.0 0.5" Volume="0.25" />
  <particle Position="0.5 0.5" Volume="0.25" />
</particles>

The shape attribute is the per-particle shape: empty for one value per
particle, "3" for a vector, "3 3" for a matrix. Each particle entry holds
the flattened values, space-separated. Only integer and floating-point
dtypes are supported.
"""
from __future__ import annotations
import math
import xml.etree.ElementTree as ET
from pathlib import Path

import numpy as np

from ..errors import CorruptSnapshotError

POSITION_FIELD = "Position"


def write_particles(path: str | Path, body_name: str, fields: dict[str, np.ndarray]) -> None:
    """
    Write named per-particle arrays to an XML file.

    Args:
        path: Destination file. Overwritten if it exists.
        body_name: Stored as an attribute for diagnostics only.
        fields: Mapping of field name to array with leading dimension N.
                All arrays must agree on N.

    Raises:
        ValueError: If arrays disagree on particle count.
        TypeError: If an array dtype is not integer or floating point.
    """
    counts = {arr.shape[0] for arr in fields.values()}
    if len(counts) > 1:
        raise ValueError(f"Fields of body '{body_name}' disagree on particle count: {sorted(counts)}")
    count = counts.pop() if counts else 0

    root = ET.Element("particles", body=body_name, count=str(count))
    for name, arr in fields.items():
        if arr.dtype.kind not in "iuf":
            raise TypeError(f"Field '{name}' has unsupported dtype {arr.dtype}")
        shape = " ".join(str(d) for d in arr.shape[1:])
        ET.SubElement(root, "field", name=name, dtype=arr.dtype.name, shape=shape)

    for i in range(count):
        attrs = {name: _format_row(arr[i]) for name, arr in fields.items()}
        ET.SubElement(root, "particle", attrs)

    tree = ET.ElementTree(root)
    ET.indent(tree)
    tree.write(path, encoding="utf-8", xml_declaration=True)


def read_particles(path: str | Path) -> dict[str, np.ndarray]:
    """
    Read the arrays written by write_particles().

    Returns:
        Mapping of field name to array, in file order.

    Raises:
        CorruptSnapshotError: If the file is not valid particle XML.
    """
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise CorruptSnapshotError(path, str(e)) from e

    if root.tag != "particles":
        raise CorruptSnapshotError(path, f"unexpected root element <{root.tag}>")

    specs = []
    for f in root.findall("field"):
        try:
            shape = tuple(int(d) for d in f.attrib["shape"].split())
            specs.append((f.attrib["name"], np.dtype(f.attrib["dtype"]), shape))
        except (KeyError, TypeError, ValueError) as e:
            raise CorruptSnapshotError(path, f"bad field header: {e}") from e

    particles = root.findall("particle")
    declared = root.get("count")
    if declared is not None and declared != str(len(particles)):
        raise CorruptSnapshotError(path, f"count={declared} but {len(particles)} particles found")

    fields = {}
    for name, dtype, shape in specs:
        try:
            rows = [p.attrib[name].split() for p in particles]
            if any(len(row) != math.prod(shape) for row in rows):
                raise ValueError(f"expected {math.prod(shape)} values per particle")
            data = np.array(rows, dtype=dtype).reshape((len(particles), *shape))
        except (KeyError, ValueError, TypeError, OverflowError) as e:
            raise CorruptSnapshotError(path, f"bad values for field '{name}': {e}") from e
        fields[name] = data
    return fields


def _format_row(values: np.ndarray) -> str:
    """Render one particle's entry for a field as space-separated text."""
    flat = np.ravel(values)
    if flat.dtype.kind == "f":
        return " ".join(repr(float(v)) for v in flat)
    return " ".join(str(int(v)) for v in flat)
