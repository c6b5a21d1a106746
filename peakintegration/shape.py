"""Shape metrics of a chromatographic peak: widths, tailing and asymmetry."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from peakintegration.chromatogram import MSChromatogram
from peakintegration.peak import ChromatogramPeak


@dataclass
class PeakShapeMetrics:
    """The result of :func:`calculate_peak_shape_metrics`.

    Positions are retention times. ``tailing_factor`` is W0.05 / 2a, where
    W0.05 is the width at 5% of the peak height and a is the distance from
    the front slope to the apex at that height. ``asymmetry_factor`` is b / a
    measured at 10% of the peak height, b being the distance from the apex
    to the back slope.
    """

    width_at_5: float = 0.0
    width_at_10: float = 0.0
    width_at_50: float = 0.0
    start_position_at_5: float = 0.0
    start_position_at_10: float = 0.0
    start_position_at_50: float = 0.0
    end_position_at_5: float = 0.0
    end_position_at_10: float = 0.0
    end_position_at_50: float = 0.0
    total_width: float = 0.0
    tailing_factor: float = 0.0
    asymmetry_factor: float = 0.0
    slope_of_baseline: float = 0.0
    baseline_delta_2_height: float = 0.0
    points_across_baseline: int = 0
    points_across_half_height: int = 0


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    negative = (numerator < 0) != (math.copysign(1.0, denominator) < 0)
    return -math.inf if negative else math.inf


def find_pos_at_peak_height_percent(
    peaks: Sequence[ChromatogramPeak],
    left: int,
    right: int,
    peak_height: float,
    percent: float,
    is_left_half: bool,
) -> float:
    """Return the position at which the peak reaches ``percent`` of its height.

    ``left`` and ``right`` are indices spanning one half of the peak as a
    half-open range ``[left, right)``; ``right`` may be past the end. On the
    left half the search walks rightwards from ``left``, on the right half
    leftwards from ``right - 1``, and stops at the first point above the
    threshold; the last point at or below it is returned, or the starting
    point if none is.

    Raises ValueError when ``left`` is past the end of ``peaks``.
    """
    if left >= len(peaks):
        raise ValueError("no points in range to search for the peak height percentage")

    if left == right:
        return peaks[left].pos

    threshold = peak_height * percent
    if is_left_half:
        closest = left
        for index in range(left, right):
            if peaks[index].intensity > threshold:
                break
            closest = index
    else:
        closest = right - 1
        for index in range(right - 1, left - 1, -1):
            if peaks[index].intensity > threshold:
                break
            closest = index
    return peaks[closest].pos


def calculate_peak_shape_metrics(
    chromatogram: MSChromatogram,
    left: float,
    right: float,
    peak_height: float,
    peak_apex_pos: float,
) -> PeakShapeMetrics:
    """Compute widths, boundaries and tailing metrics of the peak in ``[left, right]``.

    The chromatogram must be sorted by retention time. An empty chromatogram
    gives all-zero metrics. Raises ValueError unless
    ``left <= peak_apex_pos <= right``, or when no point lies at or before
    ``right``.
    """
    metrics = PeakShapeMetrics()
    if len(chromatogram) == 0:
        return metrics

    if not (left <= peak_apex_pos <= right):
        raise ValueError("the peak apex must lie between the left and right boundaries")

    begin = chromatogram.pos_begin(left)
    apex = chromatogram.pos_begin(peak_apex_pos)
    end = chromatogram.pos_end(right)
    if end == 0:
        raise ValueError("no points at or before the right boundary")

    half_height = 0.5 * peak_height
    window = chromatogram[begin:end]
    metrics.points_across_baseline = len(window)
    metrics.points_across_half_height = sum(
        1 for peak in window if peak.intensity >= half_height
    )

    def start_at(percent: float) -> float:
        return find_pos_at_peak_height_percent(
            chromatogram, begin, apex, peak_height, percent, True
        )

    def end_at(percent: float) -> float:
        return find_pos_at_peak_height_percent(
            chromatogram, apex, end, peak_height, percent, False
        )

    metrics.start_position_at_5 = start_at(0.05)
    metrics.start_position_at_10 = start_at(0.1)
    metrics.start_position_at_50 = start_at(0.5)
    metrics.end_position_at_5 = end_at(0.05)
    metrics.end_position_at_10 = end_at(0.1)
    metrics.end_position_at_50 = end_at(0.5)

    metrics.width_at_5 = metrics.end_position_at_5 - metrics.start_position_at_5
    metrics.width_at_10 = metrics.end_position_at_10 - metrics.start_position_at_10
    metrics.width_at_50 = metrics.end_position_at_50 - metrics.start_position_at_50

    first, last = chromatogram[begin], chromatogram[end - 1]
    metrics.total_width = last.pos - first.pos
    metrics.slope_of_baseline = last.intensity - first.intensity
    metrics.baseline_delta_2_height = _divide(metrics.slope_of_baseline, peak_height)

    metrics.tailing_factor = _divide(
        metrics.width_at_5, 2 * (peak_apex_pos - metrics.start_position_at_5)
    )
    metrics.asymmetry_factor = _divide(
        metrics.end_position_at_10 - peak_apex_pos,
        peak_apex_pos - metrics.start_position_at_10,
    )
    return metrics


__all__ = [
    "PeakShapeMetrics",
    "find_pos_at_peak_height_percent",
    "calculate_peak_shape_metrics",
]