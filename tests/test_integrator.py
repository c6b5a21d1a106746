import pytest

from peakintegration.chromatogram import MSChromatogram
from peakintegration.integrator import (
    BaselineType,
    IntegrationType,
    Param,
    PeakIntegrator,
    simpson,
)
from peakintegration.peak import ChromatogramPeak
from peakintegration.shape import calculate_peak_shape_metrics


def make_chrom(points):
    return MSChromatogram([ChromatogramPeak(rt, i) for rt, i in points])


def integrator(integration="intensity_sum", baseline="base_to_base"):
    pi = PeakIntegrator()
    pi.update_members(Param(integration_type=integration, baseline_type=baseline))
    return pi


LINEAR = make_chrom([(float(x), x + 1.0) for x in range(5)])
CONSTANT = make_chrom([(float(x), 2.0) for x in range(6)])
PEAK = make_chrom([(0.0, 1.0), (1.0, 4.0), (2.0, 9.0), (3.0, 5.0), (4.0, 3.0)])


def test_defaults():
    pi = PeakIntegrator()
    assert pi.integration_type == "intensity_sum"
    assert pi.baseline_type == "base_to_base"
    params = PeakIntegrator.default_parameters()
    assert params.integration_type == IntegrationType.INTENSITY_SUM
    assert params.baseline_type == BaselineType.BASE_TO_BASE


def test_update_members_accepts_enums():
    pi = integrator(IntegrationType.TRAPEZOID, BaselineType.VERTICAL_DIVISION_MAX)
    assert pi.integration_type == "trapezoid"
    assert pi.baseline_type == "vertical_division_max"


def test_left_not_below_right_raises():
    with pytest.raises(ValueError):
        PeakIntegrator().integrate_peak(PEAK, 2.0, 2.0)


def test_invalid_integration_type_raises():
    with pytest.raises(ValueError):
        integrator("bogus").integrate_peak(PEAK, 0.0, 4.0)


def test_invalid_baseline_type_raises():
    with pytest.raises(ValueError):
        integrator(baseline="bogus").estimate_background(PEAK, 0.0, 4.0, 2.0)


def test_height_and_apex():
    result = PeakIntegrator().integrate_peak(PEAK, 0.0, 4.0)
    assert result.height == 9.0
    assert result.apex_pos == 2.0


def test_apex_defaults_to_middle_without_positive_points():
    chrom = make_chrom([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)])
    result = PeakIntegrator().integrate_peak(chrom, 0.0, 2.0)
    assert result.apex_pos == 1.0
    assert result.height == 0.0


def test_intensity_sum_constant():
    result = integrator("intensity_sum").integrate_peak(CONSTANT, 1.0, 4.0)
    assert result.area == pytest.approx(4 * 2.0)


def test_trapezoid_constant():
    result = integrator("trapezoid").integrate_peak(CONSTANT, 1.0, 4.0)
    assert result.area == pytest.approx(3.0 * 2.0)


def test_trapezoid_single_point_is_zero():
    result = integrator("trapezoid").integrate_peak(CONSTANT, 1.0, 1.5)
    assert result.area == 0.0


def test_simpson_odd_matches_trapezoid_on_linear_data():
    trap = integrator("trapezoid").integrate_peak(LINEAR, 0.0, 4.0).area
    simp = integrator("simpson").integrate_peak(LINEAR, 0.0, 4.0).area
    assert simp == pytest.approx(trap)


def test_simpson_exact_for_quadratic():
    chrom = make_chrom([(float(x), float(x * x)) for x in range(5)])
    result = integrator("simpson").integrate_peak(chrom, 0.0, 4.0)
    assert result.area == pytest.approx(64.0 / 3.0)


def test_simpson_two_points_falls_back_to_trapezoid():
    trap = integrator("trapezoid").integrate_peak(PEAK, 1.0, 2.0).area
    simp = integrator("simpson").integrate_peak(PEAK, 1.0, 2.0).area
    assert simp == pytest.approx(trap)


def test_simpson_even_points_averages_neighbouring_windows():
    trap = integrator("trapezoid").integrate_peak(CONSTANT, 1.0, 4.0).area
    simp = integrator("simpson").integrate_peak(CONSTANT, 1.0, 4.0).area
    assert simp == pytest.approx(trap)


def test_simpson_function_short_input():
    assert simpson([]) == 0.0
    assert simpson(list(PEAK)[:2]) == 0.0


def test_background_vertical_division_min_and_max():
    chrom = make_chrom([(0.0, 1.0), (1.0, 8.0), (2.0, 10.0), (3.0, 6.0), (4.0, 3.0)])
    low = integrator("trapezoid", "vertical_division_min").estimate_background(
        chrom, 0.0, 4.0, 2.0
    )
    high = integrator("trapezoid", "vertical_division_max").estimate_background(
        chrom, 0.0, 4.0, 2.0
    )
    assert (low.height, low.area) == (1.0, 4.0 * 1.0)
    assert (high.height, high.area) == (3.0, 4.0 * 3.0)


def test_vertical_division_is_alias_for_min():
    a = integrator("intensity_sum", "vertical_division").estimate_background(
        PEAK, 0.0, 4.0, 2.0
    )
    b = integrator("intensity_sum", "vertical_division_min").estimate_background(
        PEAK, 0.0, 4.0, 2.0
    )
    assert a == b
    assert a.area == pytest.approx(1.0 * 5)


def test_base_to_base_flat_ends():
    bg = integrator("trapezoid").estimate_background(CONSTANT, 1.0, 4.0, 2.0)
    assert bg.height == pytest.approx(2.0)
    assert bg.area == pytest.approx(3.0 * 2.0)


def test_base_to_base_matches_linear_signal():
    for kind in ("intensity_sum", "trapezoid", "simpson"):
        pi = integrator(kind)
        area = pi.integrate_peak(LINEAR, 0.0, 4.0).area
        bg = pi.estimate_background(LINEAR, 0.0, 4.0, 2.0)
        assert bg.area == pytest.approx(area)
        assert bg.height == pytest.approx(LINEAR[2].intensity)


def test_background_empty_range_raises():
    with pytest.raises(ValueError):
        PeakIntegrator().estimate_background(PEAK, 10.0, 20.0, 15.0)


def test_shape_metrics_delegate():
    pi = PeakIntegrator()
    got = pi.calculate_peak_shape_metrics(PEAK, 0.0, 4.0, 9.0, 2.0)
    assert got == calculate_peak_shape_metrics(PEAK, 0.0, 4.0, 9.0, 2.0)
    assert got.points_across_baseline == 5


def test_shape_metrics_apex_outside_raises():
    with pytest.raises(ValueError):
        PeakIntegrator().calculate_peak_shape_metrics(PEAK, 0.0, 2.0, 9.0, 3.0)