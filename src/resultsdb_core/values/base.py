# src/resultsdb_core/values/base.py
"""
Defines the abstract, unit-tagged scalar `Value` and its kind registry.

A Value is either a `RealValue` or a `ComplexValue`. The two cases form a tagged
union: each concrete class carries a `kind` (see `SampleKind`) and registers
itself with `@register_kind`, which lets the arithmetic in `operations.py` build
results of the promoted kind without importing the concrete classes.

Invalid results are represented by a NaN payload ("invalid sentinel") rather
than by raising. NaN is absorbing: any operation touching an invalid operand
returns an invalid value again, so figure-of-merit chains never crash halfway.
Use `as_optional()` to turn the sentinel into an explicit `None`.
"""
import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Dict, Optional, Type, TypeVar, Union

from ..enums import SampleKind
from ..units import Quantity, to_quantity

logger = logging.getLogger(__name__)

TValue = TypeVar("TValue", bound="Value")

_VALUE_TYPES: Dict[SampleKind, Type["Value"]] = {}


class Value(ABC):
    """
    Abstract scalar with a unit string and an invalid/NaN sentinel.

    Concrete subclasses are frozen dataclasses with the fields `value` and `unit`.
    """
    kind: ClassVar[SampleKind]
    unit: str

    @property
    @abstractmethod
    def payload(self) -> Union[float, complex]:
        """The raw numeric payload (a float or a complex)."""
        ...

    @abstractmethod
    def is_nan(self) -> bool:
        """True for the invalid sentinel."""
        ...

    @abstractmethod
    def negate(self: TValue) -> TValue:
        """Returns a new value with the sign of the payload flipped."""
        ...

    def is_valid(self) -> bool:
        return not self.is_nan()

    def as_optional(self: TValue) -> Optional[TValue]:
        """Returns None for the invalid sentinel and the value itself otherwise."""
        return None if self.is_nan() else self

    def get_unit(self) -> str:
        return self.unit

    def to_quantity(self) -> Quantity:
        """
        Converts the value to a pint Quantity.

        Raises:
            UnitParseError: if the unit tag is unknown to pint.
        """
        return to_quantity(self.payload, self.unit)

    # --- Arithmetic (left operand's unit is kept, the right unit is discarded) ---

    def add(self, other) -> "Value":
        from .operations import combine_values
        return combine_values("add", self, other)

    def subtract(self, other) -> "Value":
        from .operations import combine_values
        return combine_values("subtract", self, other)

    def multiply(self, other) -> "Value":
        from .operations import combine_values
        return combine_values("multiply", self, other)

    def divide(self, other) -> "Value":
        from .operations import combine_values
        return combine_values("divide", self, other)

    def _binary_dunder(self, op_name: str, other, reflected: bool = False):
        from .operations import combine_values, is_scalar_operand
        if not (isinstance(other, Value) or is_scalar_operand(other)):
            return NotImplemented
        return combine_values(op_name, self, other, reflected=reflected)

    def __add__(self, other):
        return self._binary_dunder("add", other)

    def __radd__(self, other):
        return self._binary_dunder("add", other, reflected=True)

    def __sub__(self, other):
        return self._binary_dunder("subtract", other)

    def __rsub__(self, other):
        return self._binary_dunder("subtract", other, reflected=True)

    def __mul__(self, other):
        return self._binary_dunder("multiply", other)

    def __rmul__(self, other):
        return self._binary_dunder("multiply", other, reflected=True)

    def __truediv__(self, other):
        return self._binary_dunder("divide", other)

    def __rtruediv__(self, other):
        return self._binary_dunder("divide", other, reflected=True)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __complex__(self) -> complex:
        return complex(self.payload)


def register_kind(kind: SampleKind):
    """
    A class decorator registering a concrete Value class as the implementation of `kind`.

    Args:
        kind: The SampleKind the decorated class represents.
    """
    def decorator(cls: Type[TValue]) -> Type[TValue]:
        if not issubclass(cls, Value):
            raise TypeError(f"@register_kind expects a Value subclass, got {cls}.")
        cls.kind = kind
        _VALUE_TYPES[kind] = cls
        logger.debug(f"Class '{cls.__name__}' registered as the {kind.name} value type.")
        return cls

    return decorator


def value_type_for(kind: SampleKind) -> Type[Value]:
    """Returns the concrete Value class registered for `kind`."""
    return _VALUE_TYPES[kind]
