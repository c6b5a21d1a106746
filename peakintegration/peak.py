"""Single data points of a chromatogram and orderings over them."""

from __future__ import annotations

from numbers import Real
from typing import Union

from peakintegration.position import DPosition


class ChromatogramPeak:
    """A one-dimensional chromatogram data point: a retention time and an intensity.

    The retention time is held as a one-dimensional :class:`DPosition`;
    ``rt``, ``pos`` and ``mz`` are all names for its single coordinate.
    """

    __slots__ = ("_position", "intensity")

    DIMENSION = 1

    def __init__(self, rt: Union[Real, DPosition] = 0.0, intensity: Real = 0.0) -> None:
        self._position = _as_position(rt)
        self.intensity = intensity

    @property
    def position(self) -> DPosition:
        """The point's position as a one-dimensional coordinate."""
        return self._position

    @position.setter
    def position(self, value: Union[Real, DPosition]) -> None:
        self._position = _as_position(value)

    @property
    def rt(self) -> Real:
        """The retention time."""
        return self._position[0]

    @rt.setter
    def rt(self, value: Real) -> None:
        self._position[0] = value

    @property
    def pos(self) -> Real:
        """The retention time, under its generic name."""
        return self._position[0]

    @pos.setter
    def pos(self, value: Real) -> None:
        self._position[0] = value

    @property
    def mz(self) -> Real:
        """The retention time, under the name used for spectra."""
        return self._position[0]

    @mz.setter
    def mz(self, value: Real) -> None:
        self._position[0] = value

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChromatogramPeak):
            return NotImplemented
        return self.intensity == other.intensity and self._position == other._position

    def __str__(self) -> str:
        return f"POS: {self.rt:g} INT: {self.intensity:g}"

    def __repr__(self) -> str:
        return f"ChromatogramPeak(rt={self.rt!r}, intensity={self.intensity!r})"


def _as_position(value: Union[Real, DPosition]) -> DPosition:
    if isinstance(value, DPosition):
        if len(value) != ChromatogramPeak.DIMENSION:
            raise ValueError("a chromatogram peak position must be one-dimensional")
        return DPosition(*value)
    return DPosition(value)


def _intensity_of(item: Union[ChromatogramPeak, Real]) -> Real:
    return item.intensity if isinstance(item, ChromatogramPeak) else item


def _rt_of(item: Union[ChromatogramPeak, Real]) -> Real:
    return item.rt if isinstance(item, ChromatogramPeak) else item


def _position_of(item: Union[ChromatogramPeak, DPosition]) -> DPosition:
    return item.position if isinstance(item, ChromatogramPeak) else item


def intensity_less(left: Union[ChromatogramPeak, Real], right: Union[ChromatogramPeak, Real]) -> bool:
    """Order by intensity; either side may be a peak or a bare intensity."""
    return _intensity_of(left) < _intensity_of(right)


def rt_less(left: Union[ChromatogramPeak, Real], right: Union[ChromatogramPeak, Real]) -> bool:
    """Order by retention time; either side may be a peak or a bare time."""
    return _rt_of(left) < _rt_of(right)


def position_less(
    left: Union[ChromatogramPeak, DPosition], right: Union[ChromatogramPeak, DPosition]
) -> bool:
    """Order by position; either side may be a peak or a :class:`DPosition`."""
    return _position_of(left) < _position_of(right)