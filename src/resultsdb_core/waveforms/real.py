# src/resultsdb_core/waveforms/real.py
import logging
from typing import Optional, Union

import numpy as np

from ..constants import DECIBEL_UNIT, DEGREE_UNIT, UNITLESS
from ..enums import SampleKind
from ..values import RealValue, Value
from . import numerics
from .base import Waveform, register_kind

logger = logging.getLogger(__name__)

Level = Union[float, RealValue]


def _level_payload(val: Level) -> float:
    if isinstance(val, Value):
        if val.kind is not SampleKind.REAL:
            raise TypeError("Crossing levels must be real.")
        return val.payload
    return float(val)


@register_kind(SampleKind.REAL)
class RealWaveform(Waveform):
    """
    A waveform with float64 samples.

    Adds the analyses that only make sense on an ordered y-axis: level crossings,
    extrema, settling time and the elementwise transcendental functions.
    """

    # --- Level crossings ---

    def cross(self, val: Level, edge: Optional[int] = None) -> Union[RealValue, "RealWaveform"]:
        """
        Finds where the waveform crosses the level `val`.

        A sample lying exactly on `val` is one crossing, not one per adjoining
        segment, and a flat stretch on `val` reports only its left end.

        Args:
            val: The y-level, as a float or a RealValue.
            edge: 1-indexed occurrence to return. When omitted, all crossings are returned.

        Returns:
            With `edge`: the x-position of the `edge`-th crossing as a RealValue in
            `unit_x` (invalid when there are fewer crossings, `edge < 1` or `val`
            is invalid). Without `edge`: a horizontal marker waveform holding one
            sample `(x_cross, val)` per crossing.
        """
        level = _level_payload(val)

        if edge is None:
            if np.isnan(level):
                return RealWaveform.empty()
            roots = numerics.find_crossings(self.x, self.y, level)
            return RealWaveform._from_sorted(roots, np.full(roots.shape, level), self.unit_x, self.unit_y)

        if np.isnan(level) or edge < 1:
            return RealValue()
        roots = numerics.find_crossings(self.x, self.y, level)
        if edge > roots.size:
            logger.debug(f"Requested crossing #{edge} of level {level}, but only {roots.size} exist.")
            return RealValue()
        return RealValue(roots[edge - 1], self.unit_x)

    # --- Extrema ---

    def ymin(self) -> RealValue:
        if self.is_empty():
            return RealValue()
        return RealValue(np.min(self.y), self.unit_y)

    def ymax(self) -> RealValue:
        if self.is_empty():
            return RealValue()
        return RealValue(np.max(self.y), self.unit_y)

    # --- Conversions ---

    def real(self) -> "RealWaveform":
        return self

    def phase_deg(self) -> "RealWaveform":
        """Phase of real samples: 0 deg for y >= 0 and 180 deg for y < 0. NaN samples stay NaN."""
        phase = np.where(self.y < 0, 180.0, 0.0)
        phase = np.where(np.isnan(self.y), np.nan, phase)
        return self._derived(phase, unit_y=DEGREE_UNIT)

    def db10(self) -> "RealWaveform":
        """10*log10(y). Zero gives -inf and negative samples give NaN."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return self._derived(10.0 * np.log10(self.y), unit_y=DECIBEL_UNIT)

    def db20(self) -> "RealWaveform":
        """20*log10(y). Zero gives -inf and negative samples give NaN."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return self._derived(20.0 * np.log10(self.y), unit_y=DECIBEL_UNIT)

    # --- Elementwise functions (unit-less results) ---

    def _elementwise(self, func, *args) -> "RealWaveform":
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return self._derived(func(self.y, *args), unit_y=UNITLESS)

    def pow(self, exponent: float) -> "RealWaveform":
        return self._elementwise(np.power, float(exponent))

    def ln(self) -> "RealWaveform":
        return self._elementwise(np.log)

    def sin(self) -> "RealWaveform":
        return self._elementwise(np.sin)

    def asin(self) -> "RealWaveform":
        return self._elementwise(np.arcsin)

    def cos(self) -> "RealWaveform":
        return self._elementwise(np.cos)

    def acos(self) -> "RealWaveform":
        return self._elementwise(np.arccos)

    def tan(self) -> "RealWaveform":
        return self._elementwise(np.tan)

    def atan(self) -> "RealWaveform":
        return self._elementwise(np.arctan)

    # --- Transient measures ---

    def settling_time(self, band: float) -> RealValue:
        """
        Time until the waveform stays inside the band around its final value.

        The band is `final * (1 - band/2) .. final * (1 + band/2)`, where `final`
        is the last sample. The result is the last crossing of either band edge,
        measured from `xmin`. A waveform that never leaves the band settles at 0.

        Args:
            band: Total relative width of the band (e.g. 0.02 for +/-1 %).
        """
        if self.is_empty():
            return RealValue()

        final = float(self.y[-1])
        if np.isnan(final):
            return RealValue()

        crossings = np.concatenate((
            numerics.find_crossings(self.x, self.y, final * (1.0 - band / 2.0)),
            numerics.find_crossings(self.x, self.y, final * (1.0 + band / 2.0)),
        ))
        start = float(self.x[0])
        if crossings.size == 0:
            return RealValue(0.0, self.unit_x)
        return RealValue(float(np.max(crossings)) - start, self.unit_x)

    def wave_vs_wave(self, other: Waveform) -> "RealWaveform":
        """
        Parametric combination: the new x-axis is this waveform's y, the new y is `other`'s y.

        `other` is aligned onto this waveform's grid first. The result is sorted by
        the new x-axis.
        """
        if other.kind is not SampleKind.REAL:
            logger.warning("wave_vs_wave needs a real waveform as second operand; returning the empty waveform.")
            return RealWaveform.empty()
        if self.is_empty() or other.is_empty():
            return RealWaveform.empty()
        return RealWaveform(self.y, self.align(other).y, self.unit_y, other.unit_y)
