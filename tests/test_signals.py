import sys

import numpy as np
import pytest

from resampkit import signals
from resampkit.signals import (
    deinterleave,
    gen_windowed_sines,
    get_cpu_name,
    interleave,
    lrint,
    reverse_data,
    save_octave,
)


@pytest.mark.parametrize("value", [-7.0, 0.0, 3.0, 1234567.0])
def test_lrint_integral_values_unchanged(value):
    assert lrint(value) == int(value)


@pytest.mark.parametrize("base", range(-5, 6))
def test_lrint_ties_go_to_even(base):
    assert lrint(base + 0.5) % 2 == 0
    assert abs(lrint(base + 0.5) - (base + 0.5)) == 0.5


def test_lrint_rejects_nan():
    with pytest.raises(ValueError):
        lrint(float("nan"))


def test_windowed_sines_shape_and_type():
    out = gen_windowed_sines([0.01], 1.0, 1000)
    assert out.shape == (1000,)
    assert out.dtype == np.float32


def test_windowed_sines_start_at_zero_and_bounded():
    out = gen_windowed_sines([0.011111, 0.324], 1.0, 5000)
    assert out[0] == 0.0
    assert abs(out[-1]) < 1e-6
    assert np.max(np.abs(out)) <= 1.0


def test_windowed_sines_peak_near_amplitude():
    out = gen_windowed_sines([0.01], 1.0, 50000)
    assert np.max(np.abs(out)) > 0.99


def test_windowed_sines_scale_with_amplitude():
    small = gen_windowed_sines([0.02], 0.5, 2000)
    large = gen_windowed_sines([0.02], 1.0, 2000)
    np.testing.assert_allclose(small * 2, large, atol=1e-6)


@pytest.mark.parametrize("freq", [0.0, -0.1, 0.5, 0.7])
def test_windowed_sines_reject_bad_frequency(freq):
    with pytest.raises(ValueError):
        gen_windowed_sines([freq], 1.0, 100)


def test_interleave_orders_by_frame():
    out = interleave([[1.0, 2.0], [3.0, 4.0]])
    assert out.tolist() == [1.0, 3.0, 2.0, 4.0]


def test_interleave_deinterleave_round_trip():
    rng = np.random.default_rng(7)
    chans = rng.standard_normal((3, 40)).astype(np.float32)
    np.testing.assert_array_equal(deinterleave(interleave(chans), 3), chans)


def test_interleave_rejects_unequal_lengths():
    with pytest.raises(ValueError):
        interleave([[1.0, 2.0], [3.0]])


def test_deinterleave_rejects_partial_frame():
    with pytest.raises(ValueError):
        deinterleave([1.0, 2.0, 3.0], 2)


def test_reverse_data():
    assert reverse_data([1.0, 2.0, 3.0]).tolist() == [3.0, 2.0, 1.0]
    data = np.arange(11, dtype=np.float32)
    np.testing.assert_array_equal(reverse_data(reverse_data(data)), data)


def test_save_octave_format(tmp_path, capsys):
    path = tmp_path / "output.dat"
    save_octave(path, [1.5, -0.5], [2.0])
    lines = path.read_text().splitlines()
    assert lines == [
        "# Not created by Octave",
        "# name: input",
        "# type: matrix",
        "# rows: 2",
        "# columns: 1",
        " 1.5",
        "-0.5",
        "# name: output",
        "# type: matrix",
        "# rows: 1",
        "# columns: 1",
        " 2",
    ]
    assert "Dumping input and output data to file" in capsys.readouterr().out


def test_cpu_name_parsing_collapses_whitespace():
    lines = ["processor\t: 0\n", "model name\t:   Fast  Chip   X\n"]
    assert signals._cpu_name_from_lines(lines, "model name") == "Fast Chip X"


def test_cpu_name_parsing_without_match():
    assert signals._cpu_name_from_lines(["vendor: none\n"], "model name") == "Unknown"


def test_cpu_name_unknown_platform(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    assert get_cpu_name() == "Unknown"