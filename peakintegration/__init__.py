"""Chromatogram containers and peak area, background and shape-metric integration."""

__version__ = "0.1.0"

__all__ = ["position", "peak", "chromatogram", "shape", "integrator"]