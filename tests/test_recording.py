# MIT License (see LICENSE)
import numpy as np

from sim_checkpoint.io import BodyStatesRecording
from sim_checkpoint.io.json_io import load_body_states_raw


def test_record_by_physical_time(system, env):
    system.physical_time = 0.25
    paths = BodyStatesRecording(system).write_to_file()

    assert [p.name for p in paths] == ["A_250000.json", "B_250000.json"]
    assert all(p.parent == env.state_recording_folder for p in paths)


def test_record_by_iteration(system):
    paths = BodyStatesRecording(system).write_to_file(12)
    assert [p.name for p in paths] == ["A_000012.json", "B_000012.json"]


def test_history_accumulates(system, env):
    recording = BodyStatesRecording(system, system.get_body("A"))
    for step in (0, 10, 20):
        recording.write_to_file(step)
    recording.write_to_file(10)

    names = sorted(p.name for p in env.state_recording_folder.iterdir())
    assert names == ["A_000000.json", "A_000010.json", "A_000020.json"]


def test_same_microsecond_overwrites(system, env):
    recording = BodyStatesRecording(system, system.get_body("A"))
    system.physical_time = 1.0000001
    recording.write_to_file()
    system.get_body("A").position[:] = 7.0
    system.physical_time = 1.0000004
    recording.write_to_file()

    files = list(env.state_recording_folder.iterdir())
    assert [p.name for p in files] == ["A_1000000.json"]
    data = load_body_states_raw(files[0])
    assert np.allclose(data["position"], 7.0)


def test_recording_content(system):
    body = system.get_body("A")
    (path,) = BodyStatesRecording(system, body).write_to_file(1)
    data = load_body_states_raw(path)

    assert data["body"] == "A"
    assert data["particles"] == 4
    assert data["dimension"] == 3
    assert np.allclose(data["position"], body.position)
    # Only recorded variables are written.
    assert set(data["variables"]) == {"Velocity"}
    assert np.allclose(data["variables"]["Velocity"], body.variables["Velocity"])
