[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "peakintegration"
version = "0.1.0"
description = "Chromatogram peak containers and peak area, background and shape-metric integration."
requires-python = ">=3.10"
dependencies = []
keywords = ["chromatography", "mass spectrometry", "peak integration", "chromatogram", "simpson"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Chemistry",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["peakintegration"]

[tool.pytest.ini_options]
addopts = "-ra"
