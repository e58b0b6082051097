import numpy as np
import pytest

from resampkit.channels import DataType, deinterleave_bytes, interleave_bytes


def test_sizes_are_consistent():
    assert DataType.FLOAT32.size() == 4
    assert DataType.FLOAT64.size() == 2 * DataType.FLOAT32.size()
    assert DataType.INT32.size() == DataType.FLOAT32.size()
    assert DataType.INT16.size() * 2 == DataType.INT32.size()


def test_from_code_masks_flag_bits():
    assert DataType.from_code(3 | 4) is DataType.INT16
    assert DataType.from_code(1 | 8) is DataType.FLOAT64
    assert DataType.from_code(DataType.INT32) is DataType.INT32


def test_deinterleave_float32():
    data = np.array([1, 2, 3, 4, 5, 6], dtype=np.float32).tobytes()
    left, right = deinterleave_bytes(DataType.FLOAT32, data, 2)
    assert np.frombuffer(left, dtype=np.float32).tolist() == [1.0, 3.0, 5.0]
    assert np.frombuffer(right, dtype=np.float32).tolist() == [2.0, 4.0, 6.0]


def test_mono_passes_through():
    data = np.arange(5, dtype=np.int16).tobytes()
    assert deinterleave_bytes(DataType.INT16, data, 1) == [data]
    assert interleave_bytes(DataType.INT16, [data]) == data


@pytest.mark.parametrize("kind", list(DataType))
@pytest.mark.parametrize("channels", [1, 2, 5])
def test_round_trip(kind, channels):
    samples = (np.arange(channels * 17) - 40).astype(kind.dtype)
    data = samples.tobytes()
    split = deinterleave_bytes(kind, data, channels)
    assert len(split) == channels
    assert all(len(buffer) == 17 * kind.size() for buffer in split)
    assert interleave_bytes(kind, split) == data


def test_int_code_accepted():
    data = np.array([10, -10, 20, -20], dtype=np.int32).tobytes()
    split = deinterleave_bytes(2, data, 2)
    assert np.frombuffer(split[1], dtype=np.int32).tolist() == [-10, -20]


def test_deinterleave_rejects_partial_frame():
    data = np.zeros(3, dtype=np.float64).tobytes()
    with pytest.raises(ValueError):
        deinterleave_bytes(DataType.FLOAT64, data, 2)


def test_deinterleave_rejects_zero_channels():
    with pytest.raises(ValueError):
        deinterleave_bytes(DataType.FLOAT32, b"", 0)


def test_interleave_rejects_unequal_buffers():
    with pytest.raises(ValueError):
        interleave_bytes(DataType.INT16, [b"\x00\x00", b"\x00\x00\x00\x00"])


def test_interleave_rejects_no_buffers():
    with pytest.raises(ValueError):
        interleave_bytes(DataType.FLOAT32, [])