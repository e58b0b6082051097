"""Conversion between interleaved and split-channel raw sample buffers."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

import numpy as np


class DataType(Enum):
    """Raw sample formats, numbered as on the command line."""

    FLOAT32 = 0
    FLOAT64 = 1
    INT32 = 2
    INT16 = 3

    @classmethod
    def from_code(cls, code: "DataType | int") -> "DataType":
        """Resolve a type, ignoring flag bits above the low two."""
        if isinstance(code, DataType):
            return code
        return cls(int(code) & 3)

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(_DTYPES[self])

    def size(self) -> int:
        """Bytes taken by one sample of this type."""
        return self.dtype.itemsize


_DTYPES = {
    DataType.FLOAT32: np.float32,
    DataType.FLOAT64: np.float64,
    DataType.INT32: np.int32,
    DataType.INT16: np.int16,
}


def deinterleave_bytes(
    data_type: DataType | int, data: bytes, channels: int
) -> list[bytes]:
    """Split an interleaved buffer into one buffer per channel."""
    kind = DataType.from_code(data_type)
    if channels < 1:
        raise ValueError("channels must be at least 1")
    frame_size = kind.size() * channels
    if len(data) % frame_size:
        raise ValueError(
            f"{len(data)} bytes is not a whole number of {frame_size}-byte frames"
        )
    if channels == 1:
        return [bytes(data)]
    frames = np.frombuffer(data, dtype=kind.dtype).reshape(-1, channels)
    return [column.tobytes() for column in frames.T]


def interleave_bytes(data_type: DataType | int, buffers: Sequence[bytes]) -> bytes:
    """Merge per-channel buffers into one interleaved buffer."""
    kind = DataType.from_code(data_type)
    if not buffers:
        raise ValueError("at least one channel buffer is required")
    if len({len(buffer) for buffer in buffers}) != 1:
        raise ValueError("channel buffers must all be the same length")
    if len(buffers[0]) % kind.size():
        raise ValueError("buffer length is not a whole number of samples")
    if len(buffers) == 1:
        return bytes(buffers[0])
    columns = [np.frombuffer(buffer, dtype=kind.dtype) for buffer in buffers]
    return np.stack(columns, axis=1).tobytes()