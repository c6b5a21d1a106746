"""A chromatogram: an ordered collection of retention-time/intensity points."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator, MutableSequence
from itertools import pairwise
from numbers import Real
from typing import Optional, overload

from peakintegration.peak import ChromatogramPeak


class MSChromatogram(MutableSequence):
    """A list of :class:`ChromatogramPeak` objects with optional per-peak metadata arrays.

    Range searches return list indices. Searches expect the peaks to be
    sorted by retention time; on an unsorted chromatogram their result is
    undefined.
    """

    def __init__(
        self,
        peaks: Optional[Iterable[ChromatogramPeak]] = None,
        float_data_arrays: Optional[Iterable[Iterable[float]]] = None,
        integer_data_arrays: Optional[Iterable[Iterable[int]]] = None,
    ) -> None:
        self._peaks: list[ChromatogramPeak] = [
            _checked(peak) for peak in (peaks or ())
        ]
        self.float_data_arrays: list[list[float]] = [
            list(array) for array in (float_data_arrays or ())
        ]
        self.integer_data_arrays: list[list[int]] = [
            list(array) for array in (integer_data_arrays or ())
        ]

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._peaks)

    def __iter__(self) -> Iterator[ChromatogramPeak]:
        return iter(self._peaks)

    @overload
    def __getitem__(self, index: int) -> ChromatogramPeak: ...

    @overload
    def __getitem__(self, index: slice) -> list[ChromatogramPeak]: ...

    def __getitem__(self, index):
        return self._peaks[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self._peaks[index] = [_checked(peak) for peak in value]
        else:
            self._peaks[index] = _checked(value)

    def __delitem__(self, index) -> None:
        """Remove the peak at ``index``, or every peak selected by a slice."""
        if isinstance(index, slice):
            removed = set(range(*index.indices(len(self._peaks))))
            self._peaks = [
                peak for i, peak in enumerate(self._peaks) if i not in removed
            ]
        else:
            self._peaks.pop(index)

    def insert(self, index: int, value: ChromatogramPeak) -> None:
        self._peaks.insert(index, _checked(value))

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def mz(self) -> float:
        """The m/z of the product entry; chromatograms carry none, so this is 0.0."""
        return 0.0

    def is_sorted(self) -> bool:
        """True when the peaks are in ascending retention-time order."""
        return all(a.rt <= b.rt for a, b in pairwise(self._peaks))

    # ------------------------------------------------------------------
    # Searching
    # ------------------------------------------------------------------
    def _bounds(self, begin: Optional[int], end: Optional[int]) -> tuple[int, int]:
        lo = 0 if begin is None else begin
        hi = len(self._peaks) if end is None else end
        return lo, hi

    def find_nearest(self, rt: Real) -> int:
        """Return the index of the peak whose retention time is closest to ``rt``.

        On a tie the earlier peak wins. Raises ValueError when empty.
        """
        if not self._peaks:
            raise ValueError(
                "There must be at least one peak to determine the nearest peak!"
            )
        index = self.rt_begin(rt)
        if index == 0:
            return 0
        if index == len(self._peaks):
            return len(self._peaks) - 1
        if abs(self._peaks[index].rt - rt) < abs(self._peaks[index - 1].rt - rt):
            return index
        return index - 1

    def rt_begin(
        self, rt: Real, begin: Optional[int] = None, end: Optional[int] = None
    ) -> int:
        """Index of the first peak in ``[begin, end)`` with retention time not below ``rt``."""
        lo, hi = self._bounds(begin, end)
        return bisect.bisect_left(self._peaks, rt, lo, hi, key=_rt_key)

    def rt_end(
        self, rt: Real, begin: Optional[int] = None, end: Optional[int] = None
    ) -> int:
        """Index of the first peak in ``[begin, end)`` with retention time above ``rt``."""
        lo, hi = self._bounds(begin, end)
        return bisect.bisect_right(self._peaks, rt, lo, hi, key=_rt_key)

    def pos_begin(
        self, rt: Real, begin: Optional[int] = None, end: Optional[int] = None
    ) -> int:
        """Alias for :meth:`rt_begin`."""
        return self.rt_begin(rt, begin, end)

    def pos_end(
        self, rt: Real, begin: Optional[int] = None, end: Optional[int] = None
    ) -> int:
        """Alias for :meth:`rt_end`."""
        return self.rt_end(rt, begin, end)

    def mz_end(self, rt: Real) -> int:
        """Alias for :meth:`rt_end` over the whole chromatogram."""
        return self.rt_end(rt)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def clear(self, clear_meta_data: bool = False) -> None:
        """Remove all peaks, and the metadata arrays too when ``clear_meta_data``."""
        self._peaks.clear()
        if clear_meta_data:
            self.float_data_arrays.clear()
            self.integer_data_arrays.clear()

    # ------------------------------------------------------------------
    # Comparison and text
    # ------------------------------------------------------------------
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MSChromatogram):
            return NotImplemented
        return (
            self._peaks == other._peaks
            and self.float_data_arrays == other.float_data_arrays
            and self.integer_data_arrays == other.integer_data_arrays
        )

    def __str__(self) -> str:
        lines = ["-- MSCHROMATOGRAM BEGIN --"]
        lines.extend(str(peak) for peak in self._peaks)
        lines.append("-- MSCHROMATOGRAM END --")
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"MSChromatogram({self._peaks!r})"


def _rt_key(peak: ChromatogramPeak) -> Real:
    return peak.rt


def _checked(peak: object) -> ChromatogramPeak:
    if not isinstance(peak, ChromatogramPeak):
        raise TypeError(
            f"a chromatogram holds ChromatogramPeak objects, not {type(peak).__name__}"
        )
    return peak


def mz_less(a: MSChromatogram, b: MSChromatogram) -> bool:
    """Order chromatograms by their m/z."""
    return a.mz < b.mz


__all__ = ["MSChromatogram", "mz_less"]