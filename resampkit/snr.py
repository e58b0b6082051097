"""Signal-to-noise measurement of a resampled test tone from its spectrum."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

MAX_SPEC_LEN = 1 << 18
MAX_PEAKS = 10

_FLOOR_DB = -200.0
_SMOOTH_DECAY = 0.999
_SIGNAL_PEAK_SPREAD_DB = 10.0


class SnrError(ValueError):
    """The spectrum cannot yield a signal-to-noise figure."""


@dataclass
class _Peak:
    peak: float = 0.0
    index: int = 0


def _halfcomplex(samples: np.ndarray) -> np.ndarray:
    """Real DFT in half-complex order: r0, r1, ..., r[n/2], i[(n+1)/2-1], ..., i1."""
    n = samples.size
    spectrum = np.fft.rfft(samples)
    packed = np.empty(n, dtype=np.float64)
    half = n // 2
    packed[: half + 1] = spectrum.real[: half + 1]
    ks = np.arange(1, (n - 1) // 2 + 1)
    packed[n - ks] = spectrum.imag[ks]
    return packed


def log_mag_spectrum(data: Sequence[float]) -> np.ndarray:
    """Log-magnitude spectrum in dB relative to its largest bin.

    The upper half and the DC bin are set to the -200 dB floor, as is any
    bin more than 300 dB below the largest.
    """
    samples = np.asarray(data, dtype=np.float64).ravel()
    n = samples.size
    magnitude = _halfcomplex(samples) if n else np.empty(0)
    half = n // 2

    ks = np.arange(1, half)
    if ks.size:
        packed = magnitude.copy()
        magnitude[ks] = np.sqrt(packed[ks] ** 2 + packed[n - ks - 1] ** 2)
        maxval = max(0.0, float(magnitude[ks].max()))
    else:
        maxval = 0.0

    magnitude[half : half + half] = 0.0
    if n:
        magnitude[0] = 0.0

    if maxval == 0.0:
        raise SnrError("signal has no energy to measure")

    normalised = magnitude / maxval
    with np.errstate(divide="ignore", invalid="ignore"):
        decibels = 20.0 * np.log10(normalised)
    return np.where(normalised < 1e-15, _FLOOR_DB, decibels)


def _is_peak(mag: np.ndarray, k: int) -> bool:
    return mag[k - 1] < mag[k] >= mag[k + 1]


def _linear_smooth(mag: np.ndarray, larger: _Peak, smaller: _Peak) -> None:
    if smaller.index < larger.index:
        for k in range(smaller.index + 1, larger.index):
            if mag[k] < mag[k - 1]:
                mag[k] = _SMOOTH_DECAY * mag[k - 1]
    else:
        for k in range(smaller.index - 1, larger.index - 1, -1):
            if mag[k] < mag[k + 1]:
                mag[k] = _SMOOTH_DECAY * mag[k + 1]


def smooth_mag_spectrum(magnitude: Sequence[float]) -> np.ndarray:
    """Fill the troughs between adjacent peaks so window side lobes vanish.

    Noise and aliasing peaks are left untouched; the input is not modified.
    """
    mag = np.array(magnitude, dtype=np.float64).ravel()
    length = mag.size

    first = _Peak()
    for k in range(1, length - 1):
        if _is_peak(mag, k):
            first = _Peak(float(mag[k]), k)
            break

    previous = first
    for k in range(first.index + 1, length - 1):
        if _is_peak(mag, k):
            current = _Peak(float(mag[k]), k)
            if current.peak > previous.peak:
                _linear_smooth(mag, current, previous)
            else:
                _linear_smooth(mag, previous, current)
            previous = current
    return mag


def _largest_peaks(magnitude: np.ndarray) -> list[_Peak]:
    peaks: list[_Peak] = []
    for k in range(1, magnitude.size - 1):
        if not _is_peak(magnitude, k):
            continue
        value = float(magnitude[k])
        if len(peaks) < MAX_PEAKS:
            peaks.append(_Peak(value, k))
        elif value > peaks[-1].peak:
            peaks[-1] = _Peak(value, k)
        else:
            continue
        peaks.sort(key=lambda p: -p.peak)
    return peaks


def find_snr(magnitude: Sequence[float], expected_peaks: int) -> float:
    """SNR in dB from a log-magnitude spectrum holding ``expected_peaks`` tones.

    Among the ten largest peaks, the first one more than 10 dB below the
    largest is taken as noise; its level's magnitude is the result.
    """
    mag = np.asarray(magnitude, dtype=np.float64).ravel()
    peaks = _largest_peaks(mag)
    if len(peaks) < expected_peaks:
        raise SnrError(
            f"bad peak_count ({len(peaks)}), expected {expected_peaks}."
        )
    top = peaks[0].peak
    for peak in peaks[1:]:
        if abs(top - peak.peak) > _SIGNAL_PEAK_SPREAD_DB:
            return abs(peak.peak)
    return top


def calculate_snr(data: Sequence[float], expected_peaks: int) -> float:
    """Signal-to-noise ratio in dB of ``data`` holding ``expected_peaks`` tones."""
    samples = np.asarray(data, dtype=np.float32).astype(np.float64).ravel()
    length = samples.size
    if length > MAX_SPEC_LEN:
        raise ValueError(
            f"data length {length} is larger than {MAX_SPEC_LEN} samples"
        )
    if length & 0x1F and length < MAX_SPEC_LEN:
        padded_length = min((length | 0x1F) + 1, MAX_SPEC_LEN)
        samples = np.concatenate([samples, np.zeros(padded_length - length)])
        length = padded_length

    magnitude = log_mag_spectrum(samples)
    half = length // 2
    magnitude[:half] = smooth_mag_spectrum(magnitude[:half])
    return find_snr(magnitude, expected_peaks)