# MIT License (see LICENSE)
import numpy as np
import pytest

from sim_checkpoint.errors import CorruptSnapshotError
from sim_checkpoint.io import xml_io
from sim_checkpoint.types import ParticleBody, SnapshotBody


def test_particle_body_satisfies_protocol():
    assert isinstance(ParticleBody("A"), SnapshotBody)


def test_variable_shape_checked():
    body = ParticleBody("A", position=np.zeros((3, 2)))
    with pytest.raises(ValueError):
        body.add_variable("Volume", [1.0, 2.0])
    with pytest.raises(ValueError):
        body.add_variable("Position", np.zeros((3, 2)))


def test_position_must_be_2d():
    with pytest.raises(ValueError):
        ParticleBody("A", position=[0.0, 1.0, 2.0])


def test_restart_xml_is_exact(tmp_path):
    """Floats that have no short decimal form still round-trip bit for bit."""
    pos = np.array([[0.1, 1 / 3], [np.pi, -2.5e-300]])
    body = ParticleBody("A", position=pos)
    body.add_variable("Density", np.array([1000.0000000001, np.nextafter(1.0, 2.0)]))
    path = tmp_path / "A_rst_000000.xml"
    body.write_particles_for_restart(path)

    copy = ParticleBody("A", position=np.zeros((2, 2)))
    copy.read_particles_for_restart(path)
    assert np.array_equal(copy.position, pos)
    assert np.array_equal(copy.variables["Density"], body.variables["Density"])


def test_empty_body_round_trip(tmp_path):
    path = tmp_path / "E_rst_000000.xml"
    ParticleBody("E", position=np.zeros((0, 2))).write_particles_for_restart(path)

    body = ParticleBody("E", position=np.ones((3, 2)))
    body.read_particles_for_restart(path)
    assert body.position.shape == (0, 2)


def test_unsupported_dtype(tmp_path):
    body = ParticleBody("A", position=np.zeros((1, 2)))
    body.add_variable("Flag", np.array([True]))
    with pytest.raises(TypeError):
        body.write_particles_for_restart(tmp_path / "A.xml")


def test_corrupt_xml(tmp_path):
    path = tmp_path / "A_rst_000001.xml"
    path.write_text("<particles><particle")
    with pytest.raises(CorruptSnapshotError):
        ParticleBody("A").read_particles_for_restart(path)


def test_count_mismatch(tmp_path):
    path = tmp_path / "A.xml"
    xml_io.write_particles(path, "A", {"Position": np.zeros((2, 3))})
    path.write_text(path.read_text().replace('count="2"', 'count="3"'))
    with pytest.raises(CorruptSnapshotError):
        xml_io.read_particles(path)


def test_missing_position_field(tmp_path):
    path = tmp_path / "A.xml"
    xml_io.write_particles(path, "A", {"Volume": np.ones(2)})
    with pytest.raises(CorruptSnapshotError):
        ParticleBody("A").read_particles_for_reload(path)


def test_integer_out_of_range(tmp_path):
    path = tmp_path / "A.xml"
    xml_io.write_particles(path, "A", {"Position": np.zeros((1, 2)), "ID": np.array([7], dtype=np.int64)})
    path.write_text(path.read_text().replace('ID="7"', 'ID="99999999999999999999"'))
    with pytest.raises(CorruptSnapshotError):
        xml_io.read_particles(path)


def test_wrong_value_count(tmp_path):
    path = tmp_path / "A.xml"
    xml_io.write_particles(path, "A", {"Position": np.zeros((1, 2))})
    path.write_text(path.read_text().replace('Position="0.0 0.0"', 'Position="0.0"'))
    with pytest.raises(CorruptSnapshotError):
        xml_io.read_particles(path)


def test_empty_body_keeps_tensor_shape(tmp_path):
    path = tmp_path / "A.xml"
    xml_io.write_particles(path, "A", {"Position": np.zeros((0, 3)), "Stress": np.zeros((0, 3, 3))})
    fields = xml_io.read_particles(path)
    assert fields["Stress"].shape == (0, 3, 3)
