# src/resultsdb_core/waveforms/complex.py
import logging

import numpy as np

from ..constants import DEGREE_UNIT
from ..enums import SampleKind
from .base import Waveform, register_kind

logger = logging.getLogger(__name__)


@register_kind(SampleKind.COMPLEX)
class ComplexWaveform(Waveform):
    """
    A waveform with complex128 samples, typically an AC transfer function over frequency.

    Ordering comparisons are not defined on complex samples; `leq`/`less`/`geq`/
    `greater` log a warning and return False.
    """

    def to_complex(self) -> "ComplexWaveform":
        return self

    def phase_deg(self) -> Waveform:
        """Phase angle in degrees, in (-180, 180]."""
        return self._derived(np.angle(self.y, deg=True), unit_y=DEGREE_UNIT, kind=SampleKind.REAL)

    def db10(self) -> Waveform:
        """10*log10(|y|)."""
        return self.abs().db10()

    def db20(self) -> Waveform:
        """20*log10(|y|)."""
        return self.abs().db20()
