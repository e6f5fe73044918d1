# src/resultsdb_core/values/complex.py
import cmath
import logging
import math
from dataclasses import dataclass

from ..constants import DEGREE_UNIT
from ..enums import SampleKind
from ..formatting import format_complex_eng
from .base import Value, register_kind
from .real import RealValue

logger = logging.getLogger(__name__)


@register_kind(SampleKind.COMPLEX)
@dataclass(frozen=True)
class ComplexValue(Value):
    """
    A complex scalar with a unit. `ComplexValue()` is the invalid sentinel (NaN+jNaN).

    Ordering comparisons are not defined for complex values.
    """
    value: complex = complex(math.nan, math.nan)
    unit: str = ""

    def __post_init__(self):
        object.__setattr__(self, "value", complex(self.value))
        object.__setattr__(self, "unit", "" if self.unit is None else str(self.unit))

    @property
    def payload(self) -> complex:
        return self.value

    def get_value(self) -> complex:
        return self.value

    def is_nan(self) -> bool:
        return cmath.isnan(self.value)

    def negate(self) -> "ComplexValue":
        if self.is_nan():
            return self
        return ComplexValue(-self.value, self.unit)

    def real(self) -> RealValue:
        return RealValue(self.value.real, self.unit)

    def imag(self) -> RealValue:
        return RealValue(self.value.imag, self.unit)

    def conjugate(self) -> "ComplexValue":
        return ComplexValue(self.value.conjugate(), self.unit)

    def abs(self) -> RealValue:
        return RealValue(abs(self.value), self.unit)

    def phase_deg(self) -> RealValue:
        """Argument of the payload in degrees."""
        return RealValue(math.degrees(cmath.phase(self.value)), DEGREE_UNIT)

    def __str__(self) -> str:
        if not self.unit:
            return format_complex_eng(self.value)
        return f"{format_complex_eng(self.value)} {self.unit}"
