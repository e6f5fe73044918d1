# src/resultsdb_core/waveforms/numerics.py
"""
Vectorised numeric kernels shared by real and complex waveforms.

All functions operate on plain NumPy arrays and assume `x` is sorted in
ascending order. They never raise on degenerate input; NaN is produced where a
value cannot be computed (IEEE semantics, warnings suppressed).
"""
import logging
from typing import Tuple, Union

import numpy as np
from scipy.integrate import trapezoid

logger = logging.getLogger(__name__)


def sort_jointly(x: np.ndarray, y: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Sorts `x` ascending and permutes `y` with it. The sort is stable, so equal x keep their order."""
    order = np.argsort(x, kind="stable")
    return x[order], y[order]


def interpolate(x: np.ndarray, y: np.ndarray, positions: Union[float, np.ndarray]) -> np.ndarray:
    """
    Evaluates the piecewise-linear function through (x, y) at `positions`.

    Positions inside [x[0], x[-1]] are interpolated on their bracketing segment,
    positions outside are extrapolated with the slope of the nearest boundary
    segment (first segment below, last segment above). A position that equals a
    sample returns that sample exactly. One sample evaluates to a constant; no
    samples evaluate to NaN.

    Duplicate x-values (e.g. left by `concat`) form zero-width segments. A
    boundary segment of zero width has no slope, so extrapolating through it
    gives NaN.
    """
    positions = np.asarray(positions, dtype=float)
    n = x.size

    if n == 0:
        return np.full(positions.shape, np.nan, dtype=y.dtype)
    if n == 1:
        return np.full(positions.shape, y[0], dtype=y.dtype)

    # Index of the lower sample of the segment used for each position, clamped so
    # that positions outside the domain reuse the first/last segment.
    lower = np.clip(np.searchsorted(x, positions, side="right") - 1, 0, n - 2)
    x0, x1 = x[lower], x[lower + 1]
    y0, y1 = y[lower], y[lower + 1]

    with np.errstate(divide="ignore", invalid="ignore"):
        slope = (y1 - y0) / (x1 - x0)
        result = y0 + slope * (positions - x0)

    result = np.where(positions == x1, y1, result)
    result = np.where(positions == x0, y0, result)
    return result


def find_crossings(x: np.ndarray, y: np.ndarray, level: float) -> np.ndarray:
    """
    Returns the x-positions where the piecewise-linear (x, y) equals `level`, ascending.

    Segment i brackets a root when (y[i]-level)*(y[i+1]-level) <= 0. A sample lying
    exactly on the level is reported once, as the end of the segment leading into
    it (or as the start of the very first segment). A flat segment on the level
    reports its left end.
    """
    if x.size < 2:
        return np.empty(0, dtype=float)

    offset = y - level
    d0, d1 = offset[:-1], offset[1:]
    brackets = (d0 * d1) <= 0

    # A segment starting on the level has already been reported by its predecessor.
    starts_on_level = d0 == 0
    starts_on_level[0] = False
    segments = np.flatnonzero(brackets & ~starts_on_level)

    x0, x1 = x[segments], x[segments + 1]
    d0, d1 = d0[segments], d1[segments]
    with np.errstate(divide="ignore", invalid="ignore"):
        roots = x0 + (d0 / (d0 - d1)) * (x1 - x0)

    roots = np.where(d1 == 0, x1, roots)
    roots = np.where(d0 == 0, x0, roots)
    return roots.astype(float)


def quadratic_derivative(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    """
    Numerical derivative dy/dx sampled on x. Requires at least two samples.

    The boundary samples use the two-point difference with their neighbour. Each
    interior sample uses the slope, at x[i], of the parabola through the samples
    i-1, i and i+1, which stays exact for quadratics on uneven grids.
    """
    dy = np.empty_like(y)

    with np.errstate(divide="ignore", invalid="ignore"):
        dy[0] = (y[1] - y[0]) / (x[1] - x[0])
        dy[-1] = (y[-1] - y[-2]) / (x[-1] - x[-2])

        if x.size > 2:
            xm, xc, xp = x[:-2], x[1:-1], x[2:]
            ym, yc, yp = y[:-2], y[1:-1], y[2:]

            a = (((ym - yc) * (xm - xp)) - ((ym - yp) * (xm - xc))) / (
                ((xm ** 2 - xc ** 2) * (xm - xp)) - ((xm ** 2 - xp ** 2) * (xm - xc))
            )
            b = ((ym - yc) / (xm - xc)) - ((a * (xm ** 2 - xc ** 2)) / (xm - xc))
            dy[1:-1] = (2 * a * xc) + b

    return dy


def trapezoid_integral(x: np.ndarray, y: np.ndarray) -> Union[float, complex]:
    """Area under (x, y) by the trapezoidal rule: sum of (x[i]-x[i-1]) * (y[i]+y[i-1]) / 2."""
    return trapezoid(y, x)
