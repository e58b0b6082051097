[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "resampkit"
version = "0.1.0"
description = "Test signals, SNR measurement, channel buffer handling and a cubic resampling stage for audio sample-rate work"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["audio", "resampling", "snr", "signal", "dsp", "sample-rate"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["resampkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
