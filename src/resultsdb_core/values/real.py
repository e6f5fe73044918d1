# src/resultsdb_core/values/real.py
import logging
import math
from dataclasses import dataclass

from ..enums import SampleKind
from ..formatting import format_eng
from .base import Value, register_kind
from .operations import coerce_operand

logger = logging.getLogger(__name__)


@register_kind(SampleKind.REAL)
@dataclass(frozen=True)
class RealValue(Value):
    """
    A real scalar with a unit. `RealValue()` is the invalid sentinel (NaN payload).

    Attributes:
        value: The float payload.
        unit: Free-form unit tag, e.g. 'V', 'Hz' or '' for unit-less values.
    """
    value: float = math.nan
    unit: str = ""

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))
        object.__setattr__(self, "unit", "" if self.unit is None else str(self.unit))

    @property
    def payload(self) -> float:
        return self.value

    def get_value(self) -> float:
        return self.value

    def is_nan(self) -> bool:
        return math.isnan(self.value)

    def negate(self) -> "RealValue":
        if self.is_nan():
            return self
        return RealValue(-self.value, self.unit)

    def leq(self, other) -> bool:
        """True when this value is <= other. Always False for the invalid sentinel."""
        return self._compare(other, lambda a, b: a <= b)

    def geq(self, other) -> bool:
        """True when this value is >= other. Always False for the invalid sentinel."""
        return self._compare(other, lambda a, b: a >= b)

    def _compare(self, other, relation) -> bool:
        if self.is_nan():
            return False
        kind, payload = coerce_operand(other)
        if kind is not SampleKind.REAL:
            logger.warning("Ordering comparison against a complex operand is not defined; returning False.")
            return False
        return relation(self.value, payload)

    def __le__(self, other):
        try:
            return self.leq(other)
        except TypeError:
            return NotImplemented

    def __ge__(self, other):
        try:
            return self.geq(other)
        except TypeError:
            return NotImplemented

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        if not self.unit:
            return format_eng(self.value)
        return f"{format_eng(self.value)} {self.unit}"
