import math

import pytest

from peakintegration.chromatogram import MSChromatogram
from peakintegration.peak import ChromatogramPeak
from peakintegration.shape import (
    PeakShapeMetrics,
    calculate_peak_shape_metrics,
    find_pos_at_peak_height_percent,
)


def _chrom(rts, intensities):
    return MSChromatogram(ChromatogramPeak(rt, i) for rt, i in zip(rts, intensities))


@pytest.fixture
def symmetric():
    return _chrom([0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0], [0.0, 1.0, 5.0, 10.0, 5.0, 1.0, 0.0])


def test_empty_chromatogram_gives_zero_metrics():
    result = calculate_peak_shape_metrics(MSChromatogram(), 0.0, 1.0, 10.0, 0.5)
    assert result == PeakShapeMetrics()


def test_apex_outside_boundaries_raises(symmetric):
    with pytest.raises(ValueError):
        calculate_peak_shape_metrics(symmetric, 1.0, 5.0, 10.0, 6.0)


def test_right_boundary_before_first_point_raises(symmetric):
    with pytest.raises(ValueError):
        calculate_peak_shape_metrics(symmetric, -3.0, -1.0, 10.0, -2.0)


def test_symmetric_peak_positions(symmetric):
    m = calculate_peak_shape_metrics(symmetric, 0.0, 6.0, 10.0, 3.0)
    assert m.start_position_at_5 == symmetric[0].rt
    assert m.start_position_at_10 == symmetric[1].rt
    assert m.start_position_at_50 == symmetric[2].rt
    assert m.end_position_at_5 == symmetric[6].rt
    assert m.end_position_at_10 == symmetric[5].rt
    assert m.end_position_at_50 == symmetric[4].rt


def test_widths_are_end_minus_start(symmetric):
    m = calculate_peak_shape_metrics(symmetric, 0.0, 6.0, 10.0, 3.0)
    assert m.width_at_5 == m.end_position_at_5 - m.start_position_at_5
    assert m.width_at_10 == m.end_position_at_10 - m.start_position_at_10
    assert m.width_at_50 == m.end_position_at_50 - m.start_position_at_50
    assert m.width_at_5 >= m.width_at_10 >= m.width_at_50


def test_symmetric_peak_factors_and_counts(symmetric):
    m = calculate_peak_shape_metrics(symmetric, 0.0, 6.0, 10.0, 3.0)
    assert m.tailing_factor == pytest.approx(1.0)
    assert m.asymmetry_factor == pytest.approx(1.0)
    assert m.points_across_baseline == len(symmetric)
    assert m.points_across_half_height == 3
    assert m.total_width == symmetric[6].rt - symmetric[0].rt
    assert m.slope_of_baseline == 0.0
    assert m.baseline_delta_2_height == 0.0


def test_baseline_slope_uses_boundary_points():
    chrom = _chrom([0.0, 1.0, 2.0, 3.0, 4.0], [2.0, 4.0, 10.0, 6.0, 3.0])
    m = calculate_peak_shape_metrics(chrom, 0.0, 4.0, 10.0, 2.0)
    assert m.slope_of_baseline == chrom[4].intensity - chrom[0].intensity
    assert m.baseline_delta_2_height == pytest.approx(m.slope_of_baseline / 10.0)


def test_sub_window_counts_only_points_inside(symmetric):
    m = calculate_peak_shape_metrics(symmetric, 1.0, 5.0, 10.0, 3.0)
    assert m.points_across_baseline == 5
    assert m.total_width == symmetric[5].rt - symmetric[1].rt


def test_apex_at_left_edge_gives_infinite_factors():
    chrom = _chrom([0.0, 1.0, 2.0], [10.0, 5.0, 0.0])
    m = calculate_peak_shape_metrics(chrom, 0.0, 2.0, 10.0, 0.0)
    assert m.start_position_at_5 == chrom[0].rt
    assert math.isinf(m.tailing_factor)
    assert math.isinf(m.asymmetry_factor)


def test_find_pos_empty_range_returns_left_point(symmetric):
    assert find_pos_at_peak_height_percent(symmetric, 2, 2, 10.0, 0.5, True) == symmetric[2].pos


def test_find_pos_left_past_end_raises(symmetric):
    with pytest.raises(ValueError):
        find_pos_at_peak_height_percent(symmetric, len(symmetric), len(symmetric), 10.0, 0.5, True)


def test_find_pos_left_half_stops_at_first_point_above(symmetric):
    pos = find_pos_at_peak_height_percent(symmetric, 0, 3, 10.0, 0.1, True)
    assert pos == symmetric[1].pos


def test_find_pos_right_half_stops_at_first_point_above(symmetric):
    pos = find_pos_at_peak_height_percent(symmetric, 3, 7, 10.0, 0.1, False)
    assert pos == symmetric[5].pos


def test_find_pos_first_point_above_threshold_returns_start(symmetric):
    left = find_pos_at_peak_height_percent(symmetric, 2, 4, 10.0, 0.1, True)
    right = find_pos_at_peak_height_percent(symmetric, 2, 5, 10.0, 0.1, False)
    assert left == symmetric[2].pos
    assert right == symmetric[4].pos