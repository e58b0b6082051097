# resampkit

Helpers for building and checking audio sample-rate converters. It provides
test-signal generators, a spectral signal-to-noise measurement, conversion
between interleaved and split-channel sample buffers, and a streaming
cubic-interpolation resampling stage. It is built on numpy.

## Installation

```
pip install resampkit
```

To run the test suite, install the `test` extra:

```
pip install "resampkit[test]"
pytest
```

## Modules

### `resampkit.signals`

- `gen_windowed_sines(freqs, max_amplitude, length)` returns a float32 array
  of `length` samples. It adds one sine per normalised frequency, splits
  `max_amplitude` equally between them and applies a Hann window. Each
  frequency must lie strictly between 0 and 0.5; otherwise `ValueError` is
  raised.
- `interleave(channels)` merges equally long one-dimensional channels into a
  single frame-interleaved array.
- `deinterleave(data, channels)` splits interleaved samples into an array of
  shape `(channels, frames)`.
- `reverse_data(data)` returns a reversed copy of the samples.
- `lrint(x)` rounds to the nearest integer, with ties going to the even
  neighbour. It raises `ValueError` for NaN and infinity.
- `save_octave(path, input, output)` writes both signals as column matrices
  named `input` and `output` to an Octave text file, and prints a line saying
  where they were written.
- `get_cpu_name()` returns the host processor's name. On Linux it reads
  `/proc/cpuinfo`; on macOS it runs `system_profiler`; on FreeBSD it runs
  `sysctl -a`. If none of these gives a name, it returns `"Unknown"`.

### `resampkit.channels`

- `DataType` is an enum of the raw sample formats: `FLOAT32` (0), `FLOAT64`
  (1), `INT32` (2) and `INT16` (3).
  - `DataType.size()` gives the size of one sample in bytes.
  - `DataType.dtype` gives the matching numpy dtype.
  - `DataType.from_code(code)` accepts either a `DataType` or an integer. For
    an integer, only its low two bits are used.
- `deinterleave_bytes(data_type, data, channels)` splits an interleaved byte
  buffer into one byte buffer per channel.
- `interleave_bytes(data_type, buffers)` joins equally long per-channel byte
  buffers back into one interleaved buffer.

Both functions raise `ValueError` when the buffer lengths do not divide into
whole samples or whole frames.

### `resampkit.snr`

- `calculate_snr(data, expected_peaks)` returns the signal-to-noise ratio in
  dB of a signal that holds `expected_peaks` test tones.
  - The input is limited to 2**18 samples.
  - It is zero-padded to a multiple of 32 samples before measuring.
- The steps of the measurement are also available on their own:
  - `log_mag_spectrum(data)` gives the log-magnitude spectrum in dB,
    relative to the largest bin.
  - `smooth_mag_spectrum(magnitude)` fills the troughs between adjacent
    peaks, so that window side lobes are not counted as noise.
  - `find_snr(magnitude, expected_peaks)` works out the figure from the ten
    largest peaks.
- `SnrError`, a subclass of `ValueError`, is raised in two cases: when fewer
  peaks are found than expected, and when the signal has no energy to
  measure.

### `resampkit.cubic`

`CubicStage(io_ratio, mult=1.0)` resamples a stream by cubic interpolation.

- It advances `io_ratio` input samples per output sample, keeping its
  position in 32.32 fixed point, and scales each output by `mult`.
- `process(samples)` accepts a block of any size. It returns every output
  sample that can be computed so far, which means each output waits until
  the two input samples after it have arrived.
- The stream starts with one zero of history.

### `resampkit.varirate`

Helpers for variable-rate resampling. The constants `OCTAVES` (5), `OLEN`
(16 seconds) and `FS` (44100 Hz) set the sweep.

- `io_ratio(pos, fm)` returns the ratio for a position `pos` in [0, 1]. The
  ratio lies between 2**-5 and 2**5. It sweeps slowly, or changes quickly
  when `fm` is true.
- `test_signal(saw, length=320, wavelength=64)` returns a float32 signal. It
  is a sawtooth when `saw` is true, and otherwise a sine of amplitude 0.9.
- `block_schedule(total, block_len)` yields `Block(length, position)` tuples.
  Together they cover `total` samples, and each `position` is where that
  block ends, in [0, 1].

## Example

```python
from resampkit.cubic import CubicStage
from resampkit.signals import gen_windowed_sines
from resampkit.snr import calculate_snr

signal = gen_windowed_sines([0.0111], 1.0, 32768)
print(calculate_snr(signal, 1))

stage = CubicStage(io_ratio=2.0)
halved = stage.process(signal)
```

## What it does not do

- It has no full-quality resampler. The only resampling it performs is the
  cubic interpolation stage; there are no band-limiting filters and no
  multi-stage conversion.
- It has no command-line programs.
- It does not read or write audio file formats. It works on arrays and raw
  byte buffers, and its only file output is the Octave text dump.