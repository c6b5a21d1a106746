"""Peak area, background and shape estimation for chromatograms."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union

from peakintegration.chromatogram import MSChromatogram
from peakintegration.peak import ChromatogramPeak
from peakintegration.shape import PeakShapeMetrics
from peakintegration.shape import calculate_peak_shape_metrics as _shape_metrics


class IntegrationType(str, Enum):
    """Techniques for computing a peak's area."""

    INTENSITY_SUM = "intensity_sum"
    TRAPEZOID = "trapezoid"
    SIMPSON = "simpson"


class BaselineType(str, Enum):
    """Shapes of the background under a peak."""

    BASE_TO_BASE = "base_to_base"
    VERTICAL_DIVISION = "vertical_division"
    VERTICAL_DIVISION_MIN = "vertical_division_min"
    VERTICAL_DIVISION_MAX = "vertical_division_max"


def _text(value: Union[str, Enum]) -> str:
    return value.value if isinstance(value, Enum) else str(value)


@dataclass
class Param:
    """The user-selectable settings of a :class:`PeakIntegrator`."""

    integration_type: Union[str, IntegrationType] = IntegrationType.INTENSITY_SUM.value
    baseline_type: Union[str, BaselineType] = BaselineType.BASE_TO_BASE.value


@dataclass
class PeakArea:
    """The result of :meth:`PeakIntegrator.integrate_peak`."""

    area: float = 0.0
    height: float = 0.0
    apex_pos: float = 0.0


@dataclass
class PeakBackground:
    """The result of :meth:`PeakIntegrator.estimate_background`."""

    area: float = 0.0
    height: float = 0.0


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    negative = (numerator < 0) != (math.copysign(1.0, denominator) < 0)
    return -math.inf if negative else math.inf


def simpson(peaks: Sequence[ChromatogramPeak]) -> float:
    """Integrate ``peaks`` with Simpson's rule for unequally spaced points.

    An odd number of points is expected; with an even number the last
    point is left out. Fewer than three points give 0.0.
    """
    integral = 0.0
    for middle in range(1, len(peaks) - 1, 2):
        before, here, after = peaks[middle - 1], peaks[middle], peaks[middle + 1]
        h = here.pos - before.pos
        k = after.pos - here.pos
        integral += (1.0 / 6.0) * (h + k) * (
            (2.0 - k / h) * before.intensity
            + ((h + k) ** 2 / (h * k)) * here.intensity
            + (2.0 - h / k) * after.intensity
        )
    return integral


def _trapezoid(peaks: Sequence[ChromatogramPeak]) -> float:
    return sum(
        (b.pos - a.pos) * ((a.intensity + b.intensity) / 2.0)
        for a, b in zip(peaks, peaks[1:])
    )


class PeakIntegrator:
    """Computes the area, background and shape metrics of a peak.

    ``integration_type`` selects summed intensities, the trapezoidal rule or
    Simpson's rule; ``baseline_type`` selects the background shape. Invalid
    values are reported when they are used.
    """

    def __init__(self) -> None:
        self.integration_type: str = IntegrationType.INTENSITY_SUM.value
        self.baseline_type: str = BaselineType.BASE_TO_BASE.value
        self.update_members(self.default_parameters())

    @staticmethod
    def default_parameters() -> Param:
        """Return the default settings: intensity sum and base-to-base."""
        return Param(
            integration_type=IntegrationType.INTENSITY_SUM.value,
            baseline_type=BaselineType.BASE_TO_BASE.value,
        )

    def update_members(self, param: Param) -> None:
        """Take over the settings held in ``param``."""
        self.integration_type = _text(param.integration_type)
        self.baseline_type = _text(param.baseline_type)

    # ------------------------------------------------------------------
    # Area
    # ------------------------------------------------------------------
    def integrate_peak(
        self, chromatogram: MSChromatogram, left: float, right: float
    ) -> PeakArea:
        """Compute the area, height and apex of the peak in ``[left, right]``.

        The chromatogram must be sorted by retention time. Raises ValueError
        when ``left >= right`` or the integration type is unknown.
        """
        if left >= right:
            raise ValueError("Left peak boundary must be smaller than right boundary!")

        begin = chromatogram.pos_begin(left)
        end = chromatogram.pos_end(right)
        window = chromatogram[begin:end]
        n_points = len(window)

        result = PeakArea(apex_pos=(left + right) / 2)
        for peak in window:
            if result.height < peak.intensity:
                result.height = peak.intensity
                result.apex_pos = peak.pos

        kind = self.integration_type
        if kind == IntegrationType.TRAPEZOID.value:
            if n_points >= 2:
                result.area = _trapezoid(window)
        elif kind == IntegrationType.SIMPSON.value:
            if n_points == 2:
                result.area = _trapezoid(window)
            elif n_points > 2:
                if n_points % 2:
                    result.area = simpson(window)
                else:
                    areas = [
                        simpson(chromatogram[begin:end - 1]),
                        simpson(chromatogram[begin + 1:end]),
                    ]
                    if begin >= 1:
                        areas.append(simpson(chromatogram[begin - 1:end]))
                    if end < len(chromatogram):
                        areas.append(simpson(chromatogram[begin:end + 1]))
                    result.area = sum(areas) / len(areas)
        elif kind == IntegrationType.INTENSITY_SUM.value:
            result.area = sum(peak.intensity for peak in window)
        else:
            raise ValueError(
                'Please set a valid value for the parameter "integration_type".'
            )
        return result

    # ------------------------------------------------------------------
    # Background
    # ------------------------------------------------------------------
    def estimate_background(
        self,
        chromatogram: MSChromatogram,
        left: float,
        right: float,
        peak_apex_pos: float,
    ) -> PeakBackground:
        """Estimate the background area and height under the peak in ``[left, right]``.

        Use the same integration type as for :meth:`integrate_peak`. Raises
        ValueError when the baseline type is unknown or no point lies in range.
        """
        begin = chromatogram.pos_begin(left)
        end = chromatogram.pos_end(right)
        if begin >= end:
            raise ValueError("no points between the peak boundaries")
        window = chromatogram[begin:end]
        first, last = window[0], window[-1]

        int_l = first.intensity
        int_r = last.intensity
        delta_int = int_r - int_l
        delta_pos = last.pos - first.pos
        min_int_pos = last.pos if int_r <= int_l else first.pos
        delta_int_apex = _divide(
            abs(delta_int) * abs(min_int_pos - peak_apex_pos), delta_pos
        )
        low, high = min(int_r, int_l), max(int_r, int_l)

        kind = self.integration_type
        by_width = kind in (IntegrationType.TRAPEZOID.value, IntegrationType.SIMPSON.value)
        by_sum = kind == IntegrationType.INTENSITY_SUM.value

        area = 0.0
        baseline = self.baseline_type
        if baseline == BaselineType.BASE_TO_BASE.value:
            height = low + delta_int_apex
            if by_width:
                area = delta_pos * (low + 0.5 * abs(delta_int))
            elif by_sum:
                n_points = len(window)
                pos_sum = sum(peak.pos for peak in window)
                rectangle_area = n_points * int_l
                slope = _divide(delta_int, delta_pos)
                triangle_area = (pos_sum - n_points * first.pos) * slope
                area = triangle_area + rectangle_area
        elif baseline in (
            BaselineType.VERTICAL_DIVISION.value,
            BaselineType.VERTICAL_DIVISION_MIN.value,
        ):
            height = low
            if by_width:
                area = delta_pos * low
            elif by_sum:
                area = low * len(window)
        elif baseline == BaselineType.VERTICAL_DIVISION_MAX.value:
            height = high
            if by_width:
                area = delta_pos * high
            elif by_sum:
                area = high * len(window)
        else:
            raise ValueError(
                'Please set a valid value for the parameter "baseline_type".'
            )
        return PeakBackground(area=area, height=height)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------
    def calculate_peak_shape_metrics(
        self,
        chromatogram: MSChromatogram,
        left: float,
        right: float,
        peak_height: float,
        peak_apex_pos: float,
    ) -> PeakShapeMetrics:
        """Compute widths, boundaries and tailing metrics of the peak in ``[left, right]``."""
        return _shape_metrics(chromatogram, left, right, peak_height, peak_apex_pos)


__all__ = [
    "IntegrationType",
    "BaselineType",
    "Param",
    "PeakArea",
    "PeakBackground",
    "PeakIntegrator",
    "simpson",
]