# peakintegration

This package provides data structures for chromatograms. It also provides tools that
measure a chromatographic peak between two retention-time boundaries. It uses only the
Python standard library and needs Python 3.10 or later.

## Modules

- `peakintegration.position`: `DPosition` is a mutable coordinate of any fixed
  dimension.
  - Ordering is lexicographic (`<`, `<=`, `>`, `>=`).
  - It supports `+`, `-`, unary `-`, and multiplication and division by a scalar.
  - Other methods: `dot`, `spatially_less_equal`, `spatially_greater_equal`,
    `clear`.
  - Named access to the first two coordinates goes through `x` and `y`.
  - Class methods that build a position: `filled`, `zero`, `min_positive`,
    `min_negative`, `max_positive`.
- `peakintegration.peak`: `ChromatogramPeak` is a single point made of a retention
  time and an intensity.
  - The retention time can be read and set as `rt`, `pos` or `mz`.
  - The point also has `position`, a one-dimensional `DPosition`.
  - The module has three ordering functions. `intensity_less` and `rt_less` take
    peaks or bare numbers. `position_less` takes peaks or `DPosition` objects.
- `peakintegration.chromatogram`: `MSChromatogram` is a mutable sequence of
  `ChromatogramPeak` objects.
  - It can hold optional `float_data_arrays` and `integer_data_arrays`.
  - Binary searches return list indices: `rt_begin`, `rt_end`, `pos_begin`,
    `pos_end` and `mz_end`. These accept optional `begin`/`end` bounds, except
    `mz_end`, which always searches the whole chromatogram.
  - `find_nearest(rt)` returns the index of the closest peak.
  - `is_sorted()` checks the retention-time order.
  - `clear(clear_meta_data=False)` removes the peaks.
  - The `mz` property is always `0.0`. `mz_less` orders chromatograms by it.
- `peakintegration.shape`: `calculate_peak_shape_metrics` returns a
  `PeakShapeMetrics` dataclass with these fields:
  - start and end positions and widths at 5, 10 and 50 % of the peak height
  - total width
  - tailing factor and asymmetry factor
  - slope of the baseline and baseline delta to height
  - number of points across the baseline and across half height

  `find_pos_at_peak_height_percent` is the helper that locates one such position
  on one half of the peak.
- `peakintegration.integrator`: `PeakIntegrator` computes a peak's area, height and
  apex (`integrate_peak`). It estimates the background (`estimate_background`) and
  also exposes `calculate_peak_shape_metrics`.
  - Its settings are carried by `Param`, take the values of `IntegrationType` and
    `BaselineType`, and are applied with `update_members`.
  - The module also provides `simpson(peaks)`, which applies Simpson's rule for
    unequally spaced points.

## Integrating a peak

```python
from peakintegration.peak import ChromatogramPeak
from peakintegration.chromatogram import MSChromatogram
from peakintegration.integrator import (
    BaselineType,
    IntegrationType,
    Param,
    PeakIntegrator,
)

chrom = MSChromatogram(
    [ChromatogramPeak(rt, i) for rt, i in [(1.0, 2.0), (2.0, 8.0), (3.0, 15.0), (4.0, 7.0), (5.0, 3.0)]]
)

integrator = PeakIntegrator()
integrator.update_members(
    Param(
        integration_type=IntegrationType.TRAPEZOID,
        baseline_type=BaselineType.BASE_TO_BASE,
    )
)

area = integrator.integrate_peak(chrom, 1.0, 5.0)
print(area.area, area.height, area.apex_pos)

background = integrator.estimate_background(chrom, 1.0, 5.0, area.apex_pos)
print(background.area, background.height)

metrics = integrator.calculate_peak_shape_metrics(chrom, 1.0, 5.0, area.height, area.apex_pos)
print(metrics.width_at_50, metrics.tailing_factor, metrics.asymmetry_factor)
```

`PeakIntegrator()` starts with the values from `PeakIntegrator.default_parameters()`:
`intensity_sum` and `base_to_base`. `Param` accepts either the enum members or
their string values.

### Integration types

| value            | method                                                        |
|------------------|---------------------------------------------------------------|
| `intensity_sum`  | sum of the intensities inside the boundaries (the default)    |
| `trapezoid`      | trapezoidal rule                                              |
| `simpson`        | Simpson's rule for unequally spaced points                    |

Simpson's rule needs an odd number of points.

- With an odd number of points, it integrates the window directly.
- With an even number greater than two, it averages the Simpson areas of up to four
  odd-length windows:
  - without the last point
  - without the first point
  - with one more point on the left, if there is one
  - with one more point on the right, if there is one
- With exactly two points, it falls back to the trapezoidal rule.

Simpson's rule can return a negative area even when every intensity is positive.

### Baseline types

| value                    | background shape                                         |
|--------------------------|----------------------------------------------------------|
| `base_to_base`           | trapezoid between the two boundary intensities (default) |
| `vertical_division_min`  | rectangle at the lower boundary intensity                |
| `vertical_division`      | same as `vertical_division_min`                          |
| `vertical_division_max`  | rectangle at the higher boundary intensity               |

The background area follows the integration type. With `trapezoid` and `simpson`
it is computed over the retention-time span. With `intensity_sum` it is a sum over
the points in range. Use the same integration type for `estimate_background` as for
`integrate_peak`.

## Errors

Invalid values are reported with `ValueError` when they are used, not when they are
set. `ValueError` is raised in these cases:

- `integrate_peak`: the left boundary is not smaller than the right one, or the
  integration type is unknown.
- `estimate_background`: the baseline type is unknown, or no point lies between the
  boundaries.
- `calculate_peak_shape_metrics`: the apex lies outside `[left, right]`, or no point
  lies at or before the right boundary. An empty chromatogram gives all-zero
  metrics.
- `MSChromatogram.find_nearest`: the chromatogram is empty.

Divisions by zero in the background and shape metrics do not raise. They give
`inf` or `nan`.

The chromatogram must be sorted by retention time before you search or integrate
it. If it is not sorted, the results are undefined. `MSChromatogram.is_sorted()`
checks the order.

## What it does not do

- It does not read or write chromatogram files.
- It has no command-line tool.
- It does not detect peaks: the boundaries must be supplied.
- It does not fit a peak model to the data.
- It does not smooth or align chromatograms.