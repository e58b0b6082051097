"""Cubic-interpolation resampling stage over a stream of samples."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

_FRACTION_BITS = 32
_FRACTION_SCALE = float(1 << _FRACTION_BITS)
_FRACTION_MASK = (1 << _FRACTION_BITS) - 1

# Interpolation reads one sample before and two after the current one.
_PRE = 1
_POST = 2


class CubicStage:
    """Resample by cubic interpolation, stepping ``io_ratio`` inputs per output.

    Positions are kept in 32.32 fixed point.  Input may arrive in blocks of
    any size; output is produced once the two samples after each output
    position are available.  The stream starts with one zero of history.
    """

    def __init__(self, io_ratio: float, mult: float = 1.0) -> None:
        if not io_ratio > 0.0:
            raise ValueError(f"io_ratio must be positive, not {io_ratio!r}")
        step = round(io_ratio * _FRACTION_SCALE)
        if step <= 0:
            raise ValueError(f"io_ratio {io_ratio!r} is too small")
        self.io_ratio = io_ratio
        self.mult = mult
        self._step = step
        self._buffer = np.zeros(_PRE, dtype=np.float64)
        self._at = 0

    def process(self, samples: Sequence[float]) -> np.ndarray:
        """Take in ``samples`` and return every output sample now computable."""
        incoming = np.asarray(samples, dtype=np.float64).ravel()
        buf = np.concatenate([self._buffer, incoming])
        num_in = buf.size - _PRE - _POST

        limit = num_in << _FRACTION_BITS
        count = max(0, (limit - self._at + self._step - 1) // self._step)

        positions = self._at + self._step * np.arange(count, dtype=np.int64)
        index = (positions >> _FRACTION_BITS) + _PRE
        x = (positions & _FRACTION_MASK) / _FRACTION_SCALE

        s0 = buf[index] if count else np.empty(0)
        if count:
            sm1 = buf[index - 1]
            s1 = buf[index + 1]
            s2 = buf[index + 2]
            b = 0.5 * (s1 + sm1) - s0
            a = (1 / 6.0) * (s2 - s1 + sm1 - s0 - 4 * b)
            c = s1 - s0 - a - b
            output = self.mult * (((a * x + b) * x + c) * x + s0)
        else:
            output = np.empty(0, dtype=np.float64)

        at = self._at + self._step * count
        consumed = min(at >> _FRACTION_BITS, max(num_in, 0))
        self._buffer = buf[consumed:]
        self._at = at - (consumed << _FRACTION_BITS)
        return output