"""Test signals, SNR measurement, channel buffer conversion and a cubic resampling stage."""

__version__ = "0.1.0"
__all__ = ["channels", "cubic", "signals", "snr", "varirate"]