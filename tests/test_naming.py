# MIT License (see LICENSE)
import pytest
from sim_checkpoint.naming import (
    pad_value_with_zeros,
    physical_time_to_index,
    convert_physical_time_to_string,
    snapshot_path,
    parse_token,
)


def test_pad_to_width():
    assert pad_value_with_zeros(5) == "000005"
    assert pad_value_with_zeros(0) == "000000"
    assert pad_value_with_zeros(42, width=10) == "0000000042"


def test_pad_never_truncates():
    """Indices wider than the field keep every digit."""
    assert pad_value_with_zeros(1234567) == "1234567"
    assert pad_value_with_zeros(10**12, width=3) == str(10**12)


def test_pad_injective_below_limit():
    tokens = {pad_value_with_zeros(i, width=3) for i in range(1000)}
    assert len(tokens) == 1000
    assert all(len(t) == 3 for t in tokens)


def test_pad_rejects_negative():
    with pytest.raises(ValueError):
        pad_value_with_zeros(-1)


def test_time_quantized_to_microseconds():
    assert physical_time_to_index(0.0) == 0
    assert physical_time_to_index(0.25) == 250000
    assert physical_time_to_index(1.0000009) == 1000000
    assert convert_physical_time_to_string(0.5) == "500000"
    assert convert_physical_time_to_string(12.5) == "12500000"


def test_time_aliasing_within_bucket():
    """Times inside one microsecond share a token, times across buckets do not."""
    assert convert_physical_time_to_string(0.5000001) == convert_physical_time_to_string(0.5000004)
    assert convert_physical_time_to_string(0.5000015) != convert_physical_time_to_string(0.5000025)


def test_negative_time_rejected():
    with pytest.raises(ValueError):
        physical_time_to_index(-0.1)


def test_snapshot_path_grammar(tmp_path):
    p = snapshot_path(tmp_path, "A_rst_", "000005", ".xml")
    assert p == tmp_path / "A_rst_000005.xml"
    assert parse_token(p.name, "A_rst_", ".xml") == 5
    assert parse_token("B_rst_000005.xml", "A_rst_", ".xml") is None
    assert parse_token("A_rst_abc.xml", "A_rst_", ".xml") is None


def test_pad_rejects_non_integers():
    with pytest.raises(TypeError):
        pad_value_with_zeros(5.9)
    with pytest.raises(TypeError):
        pad_value_with_zeros("5")


def test_parse_token_ascii_only():
    assert parse_token("Restart_time_².dat", "Restart_time_", ".dat") is None
    assert parse_token("Restart_time_٣.dat", "Restart_time_", ".dat") is None


def test_available_steps_skips_stray_files(system, env):
    from sim_checkpoint.io import RestartIO

    (env.restart_folder / "Restart_time_².dat").write_text("1.0\n")
    assert RestartIO(system).available_steps() == []
