"""Test-signal generation and small sample-buffer utilities."""

from __future__ import annotations

import math
import re
import subprocess
import sys
from collections.abc import Iterable, Sequence
from os import PathLike

import numpy as np

_UNKNOWN_CPU = "Unknown"
_WHITESPACE_RUN = re.compile(r"(\s)\s+")


def lrint(x: float) -> int:
    """Round to the nearest integer, ties going to the even neighbour."""
    if math.isnan(x) or math.isinf(x):
        raise ValueError(f"cannot round {x!r} to an integer")
    return int(round(x))


def gen_windowed_sines(
    freqs: Sequence[float], max_amplitude: float, length: int
) -> np.ndarray:
    """Sum of sines at normalised ``freqs`` with a Hann window applied.

    Each frequency is a fraction of the sample rate and must lie in the
    open interval (0, 0.5).  The result is a float32 array of ``length``.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    freqs = list(freqs)
    for index, freq in enumerate(freqs):
        if freq <= 0.0 or freq >= 0.5:
            raise ValueError(
                f"freq [{index}] == {freq:g} is out of range. Should be < 0.5."
            )

    output = np.zeros(length, dtype=np.float32)
    if length == 0:
        return output

    k = np.arange(length, dtype=np.float64)
    if freqs:
        amplitude = max_amplitude / len(freqs)
        phase = 0.9 * math.pi / len(freqs)
        for freq in freqs:
            wave = amplitude * np.sin(freq * (2 * k) * math.pi + phase)
            output = (output + wave).astype(np.float32)

    with np.errstate(divide="ignore", invalid="ignore"):
        window = 0.5 - 0.5 * np.cos((2 * k) * math.pi / (length - 1))
    return (output * window).astype(np.float32)


def interleave(channels: Iterable[Sequence[float]]) -> np.ndarray:
    """Merge per-channel sample sequences into one frame-interleaved array."""
    arrays = [np.asarray(channel) for channel in channels]
    if not arrays:
        raise ValueError("at least one channel is required")
    if len({array.shape for array in arrays}) != 1 or arrays[0].ndim != 1:
        raise ValueError("all channels must be one-dimensional and equally long")
    return np.stack(arrays, axis=1).ravel()


def deinterleave(data: Sequence[float], channels: int) -> np.ndarray:
    """Split frame-interleaved samples into an array of shape (channels, frames)."""
    if channels < 1:
        raise ValueError("channels must be at least 1")
    array = np.asarray(data)
    if array.ndim != 1 or array.size % channels:
        raise ValueError(
            f"{array.size} samples do not divide into {channels} channels"
        )
    return array.reshape(-1, channels).T.copy()


def reverse_data(data: Sequence[float]) -> np.ndarray:
    """Return the samples in reverse order."""
    return np.asarray(data)[::-1].copy()


def _write_matrix(stream, name: str, values: np.ndarray) -> None:
    stream.write(f"# name: {name}\n")
    stream.write("# type: matrix\n")
    stream.write(f"# rows: {values.size}\n")
    stream.write("# columns: 1\n")
    stream.writelines(f"{float(value): g}\n" for value in values)


def save_octave(
    path: str | PathLike[str],
    input: Sequence[float],
    output: Sequence[float],
) -> None:
    """Dump input and output samples to an Octave text matrix file."""
    print(f"Dumping input and output data to file : {path}.\n")
    with open(path, "w", encoding="ascii") as stream:
        stream.write("# Not created by Octave\n")
        _write_matrix(stream, "input", np.ravel(np.asarray(input)))
        _write_matrix(stream, "output", np.ravel(np.asarray(output)))


def _cpu_name_from_lines(lines: Iterable[str], search: str) -> str:
    """Pick the value of the first ``search: value`` line, whitespace collapsed."""
    for line in lines:
        if search in line and ":" in line:
            value = line.split(":", 1)[1].lstrip()
            return _WHITESPACE_RUN.sub(r"\1", value).rstrip()
    return _UNKNOWN_CPU


def _command_lines(command: list[str]) -> list[str] | None:
    try:
        result = subprocess.run(
            command, capture_output=True, text=True, check=False
        )
    except OSError:
        return None
    return result.stdout.splitlines()


def get_cpu_name() -> str:
    """Describe the host processor, or return "Unknown"."""
    platform = sys.platform
    if platform.startswith("linux"):
        try:
            with open("/proc/cpuinfo", encoding="utf-8", errors="replace") as f:
                lines: list[str] | None = f.readlines()
        except OSError:
            lines = None
        search = "model name"
    elif platform == "darwin":
        lines = _command_lines(
            [
                "/usr/sbin/system_profiler",
                "-detailLevel",
                "full",
                "SPHardwareDataType",
            ]
        )
        search = "Processor Name"
    elif platform.startswith("freebsd"):
        lines = _command_lines(["sysctl", "-a"])
        search = "hw.model"
    else:
        return _UNKNOWN_CPU

    if lines is None:
        return _UNKNOWN_CPU
    return _cpu_name_from_lines(lines, search)