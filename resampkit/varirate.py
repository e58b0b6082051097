"""Ratio sweeps, test signals and block scheduling for variable-rate resampling."""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import NamedTuple

import numpy as np

OCTAVES = 5
"""Resampling range, in octaves either side of unity."""
OLEN = 16
"""Output length in seconds."""
FS = 44100
"""Output sampling rate in Hz."""

DEFAULT_SIGNAL_LENGTH = 10 << OCTAVES
DEFAULT_WAVELENGTH = 2 << OCTAVES


class Block(NamedTuple):
    """One block of output: its length and the end position in [0, 1]."""

    length: int
    position: float


def io_ratio(pos: float, fm: bool) -> float:
    """I/O ratio in the 2**±OCTAVES range for output position ``pos`` in [0, 1].

    With ``fm`` the ratio changes quickly; otherwise it sweeps slowly.
    """
    if fm:
        pos = (
            0.5
            - math.cos(pos * 2 * math.pi) * 0.4
            + math.sin(pos * OLEN * 20 * math.pi) * 0.05
        )
    return math.pow(2, 2 * OCTAVES * pos - OCTAVES)


def test_signal(
    saw: bool,
    length: int = DEFAULT_SIGNAL_LENGTH,
    wavelength: int = DEFAULT_WAVELENGTH,
) -> np.ndarray:
    """A float32 saw or sine wave with the given wavelength in samples."""
    if length < 0:
        raise ValueError("length must not be negative")
    if wavelength < 2:
        raise ValueError("wavelength must be at least 2")
    i = np.arange(length)
    if saw:
        values = (i % wavelength) / (wavelength - 1.0) - 0.5
    else:
        values = 0.9 * np.sin(2 * math.pi * i / wavelength)
    return values.astype(np.float32)


test_signal.__test__ = False  # not a pytest test function


def block_schedule(total: int, block_len: int) -> Iterator[Block]:
    """Split ``total`` output samples into blocks of at most ``block_len``.

    Each block carries the position in [0, 1] of its end; the last block may
    be shorter.
    """
    if total < 0:
        raise ValueError("total must not be negative")
    if block_len < 1:
        raise ValueError("block_len must be at least 1")
    done = 0
    while done < total:
        length = min(block_len, total - done)
        done += length
        yield Block(length, done / total)