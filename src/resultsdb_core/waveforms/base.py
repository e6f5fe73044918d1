# src/resultsdb_core/waveforms/base.py
"""
Defines the abstract, unit-tagged sampled function `Waveform`.

A Waveform holds an ascending x-axis and a y-array of the same length, together
with the unit tags of both axes. `RealWaveform` stores float64 samples and
`ComplexWaveform` complex128 samples; the two classes form a tagged union on
`SampleKind` and register themselves with `@register_kind`, which lets this
module and `arithmetic.py` build results of either kind without importing them.

Invariants re-established by every constructor:

1.  `len(x) == len(y)`. Mismatched inputs degrade to the empty waveform and a
    warning is logged (shape errors never raise).
2.  `x` is ascending; x and y are sorted jointly with a stable sort.
3.  The arrays are copied on construction and stored read-only, so neither the
    caller's arrays nor the arrays handed out by `x`/`y` can alias mutable state.

Every operation returns a new waveform. Binary operators between two waveforms
first call `align`, which silently resamples the right-hand operand onto the
left-hand grid whenever the axes differ.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Dict, Iterable, Tuple, Type, TypeVar, Union

import numpy as np

from ..constants import UNITLESS
from ..enums import SampleKind, promote
from ..formatting import format_complex_eng, format_eng
from ..units import Quantity, to_quantity
from ..values import RealValue, Value, value_type_for
from . import numerics

logger = logging.getLogger(__name__)

TWaveform = TypeVar("TWaveform", bound="Waveform")

#: NumPy dtype used to store the samples of each kind.
KIND_DTYPES: Dict[SampleKind, type] = {
    SampleKind.REAL: np.float64,
    SampleKind.COMPLEX: np.complex128,
}

_WAVEFORM_TYPES: Dict[SampleKind, Type["Waveform"]] = {}


@dataclass(frozen=True)
class AxisAlignment:
    """
    Result of aligning another waveform onto this waveform's x-grid.

    Attributes:
        y: The other waveform's samples on this waveform's grid.
        resampled: False when both waveforms already shared the exact same axis,
                   True when the samples were obtained by interpolation.
    """
    y: np.ndarray
    resampled: bool


def _frozen(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


class Waveform(ABC):
    """Abstract sampled function over an ascending x-axis with unit-tagged axes."""
    kind: ClassVar[SampleKind]

    def __init__(self, x: Iterable[float] = (), y: Iterable = (), unit_x: str = UNITLESS, unit_y: str = UNITLESS):
        """
        Builds a waveform from raw sample arrays.

        Args:
            x: The x-values, in any order.
            y: The y-values matching `x` element by element.
            unit_x: Unit tag of the x-axis (e.g. 's', 'Hz').
            unit_y: Unit tag of the y-axis (e.g. 'V').
        """
        x_arr = np.array(x, dtype=float).ravel()
        y_arr = np.array(y, dtype=KIND_DTYPES[self.kind]).ravel()

        if x_arr.size != y_arr.size:
            logger.warning(
                f"Length of arrays do not match (x: {x_arr.size}, y: {y_arr.size}); "
                f"building an empty {type(self).__name__}."
            )
            x_arr = np.empty(0, dtype=float)
            y_arr = np.empty(0, dtype=KIND_DTYPES[self.kind])

        x_arr, y_arr = numerics.sort_jointly(x_arr, y_arr)
        self._set_state(x_arr, y_arr, unit_x, unit_y)

    def _set_state(self, x: np.ndarray, y: np.ndarray, unit_x: str, unit_y: str):
        self._x = _frozen(x)
        self._y = _frozen(y)
        self._unit_x = "" if unit_x is None else str(unit_x)
        self._unit_y = "" if unit_y is None else str(unit_y)

    @classmethod
    def _from_sorted(cls: Type[TWaveform], x, y, unit_x: str, unit_y: str) -> TWaveform:
        """Builds a waveform from arrays already known to be ascending in x. The arrays are copied."""
        wave = cls.__new__(cls)
        wave._set_state(
            np.array(x, dtype=float),
            np.array(y, dtype=KIND_DTYPES[cls.kind]),
            unit_x,
            unit_y,
        )
        return wave

    @classmethod
    def empty(cls: Type[TWaveform]) -> TWaveform:
        """Returns the empty waveform sentinel."""
        return cls()

    def _derived(self, y, unit_y: str = None, kind: SampleKind = None) -> "Waveform":
        """A new waveform on this x-grid with the given samples."""
        target = waveform_type_for(kind if kind is not None else self.kind)
        return target._from_sorted(self._x, y, self._unit_x, self._unit_y if unit_y is None else unit_y)

    # --- Accessors ---

    @property
    def x(self) -> np.ndarray:
        """The read-only x-values."""
        return self._x

    @property
    def y(self) -> np.ndarray:
        """The read-only y-values."""
        return self._y

    @property
    def unit_x(self) -> str:
        return self._unit_x

    @property
    def unit_y(self) -> str:
        return self._unit_y

    def get_x(self) -> np.ndarray:
        return self._x

    def get_y(self) -> np.ndarray:
        return self._y

    def get_unit_x(self) -> str:
        return self._unit_x

    def get_unit_y(self) -> str:
        return self._unit_y

    def is_empty(self) -> bool:
        return self._x.size == 0

    def __len__(self) -> int:
        return self._x.size

    def no_of_vals(self) -> int:
        """Number of samples."""
        return self._x.size

    def xmin(self) -> RealValue:
        """The smallest x-value, or the invalid sentinel for an empty waveform."""
        if self.is_empty():
            return RealValue()
        return RealValue(self._x[0], self._unit_x)

    def xmax(self) -> RealValue:
        """The largest x-value, or the invalid sentinel for an empty waveform."""
        if self.is_empty():
            return RealValue()
        return RealValue(self._x[-1], self._unit_x)

    def to_quantities(self) -> Tuple[Quantity, Quantity]:
        """
        Returns the x- and y-arrays as pint Quantities.

        Raises:
            UnitParseError: if one of the unit tags is unknown to pint.
        """
        return to_quantity(self._x, self._unit_x), to_quantity(self._y, self._unit_y)

    # --- Axis handling ---

    def same_axis(self, other: "Waveform") -> bool:
        """True when both waveforms have exactly the same x-values."""
        return self._x.size == other.x.size and bool(np.array_equal(self._x, other.x))

    def align(self, other: "Waveform") -> AxisAlignment:
        """
        Expresses `other` on this waveform's x-grid.

        This is the first step of every binary waveform operation. When the axes
        differ, `other` is evaluated at each of this waveform's x-values (linear
        interpolation/extrapolation) and `resampled` is set.
        """
        if self.same_axis(other):
            return AxisAlignment(y=other.y, resampled=False)
        logger.debug(
            f"Axes differ ({self._x.size} vs {other.x.size} points); "
            f"resampling the right-hand operand onto the left-hand grid."
        )
        return AxisAlignment(y=other.get_values(self._x), resampled=True)

    def get_values(self, positions) -> np.ndarray:
        """Evaluates the waveform at every position of an array (vectorised `get_value`)."""
        return numerics.interpolate(self._x, self._y, positions)

    def get_value(self, pos: Union[float, RealValue]) -> Value:
        """
        Evaluates the waveform at `pos` by linear interpolation.

        Outside the x-range the waveform is extrapolated with the slope of the
        nearest boundary segment. At a sample position the sample is returned
        exactly. An empty waveform or an invalid `pos` gives the invalid sentinel.

        Args:
            pos: The x-position, as a float or a RealValue.

        Returns:
            A Value of this waveform's kind, tagged with `unit_y`.
        """
        value_type = value_type_for(self.kind)
        if isinstance(pos, Value):
            if pos.kind is not SampleKind.REAL:
                raise TypeError("Waveforms can only be evaluated at real positions.")
            if pos.is_nan():
                return value_type()
            pos = pos.payload
        if self.is_empty():
            logger.debug("get_value on an empty waveform; returning the invalid sentinel.")
            return value_type()
        return value_type(self.get_values(pos)[()], self._unit_y)

    def resample(self: TWaveform, new_x: Union[Iterable[float], "Waveform"]) -> TWaveform:
        """
        Evaluates the waveform on a new x-grid.

        Args:
            new_x: The new x-values, or a waveform whose x-values are used.
        """
        grid = new_x.x if isinstance(new_x, Waveform) else np.array(new_x, dtype=float).ravel()
        if self.is_empty():
            return type(self).empty()
        grid = np.sort(grid, kind="stable")
        return type(self)._from_sorted(grid, self.get_values(grid), self._unit_x, self._unit_y)

    def clip(self: TWaveform, left: float, right: float) -> TWaveform:
        """
        Restricts the waveform to left <= x <= right.

        Boundary samples are synthesised by interpolation at `left` and `right`
        when those lie inside the current x-range and do not coincide with a
        kept sample, so the clipped domain matches the requested range. An
        empty selection yields the empty waveform.
        """
        left, right = float(left), float(right)
        if self.is_empty() or not left <= right:
            return type(self).empty()

        inside = (self._x >= left) & (self._x <= right)
        new_x, new_y = self._x[inside], self._y[inside]
        x_first, x_last = self._x[0], self._x[-1]

        if x_first <= left <= x_last and (new_x.size == 0 or new_x[0] != left):
            new_x = np.concatenate(([left], new_x))
            new_y = np.concatenate((np.atleast_1d(self.get_values(left)), new_y))

        if x_first <= right <= x_last and (new_x.size == 0 or new_x[-1] != right):
            new_x = np.concatenate((new_x, [right]))
            new_y = np.concatenate((new_y, np.atleast_1d(self.get_values(right))))

        if new_x.size == 0:
            return type(self).empty()
        return type(self)._from_sorted(new_x, new_y, self._unit_x, self._unit_y)

    def concat(self, other: "Waveform") -> "Waveform":
        """
        Appends the samples of `other` and re-sorts by x. Coincident x-values are kept.

        Concatenating a real with a complex waveform gives a complex waveform.
        The units of the non-empty receiver are kept.
        """
        kind = promote(self.kind, other.kind)
        dtype = KIND_DTYPES[kind]
        donor = other if self.is_empty() else self
        return waveform_type_for(kind)(
            np.concatenate((self._x, other.x)),
            np.concatenate((self._y.astype(dtype), other.y.astype(dtype))),
            donor.unit_x,
            donor.unit_y,
        )

    # --- Calculus ---

    def derive(self, unit: str = UNITLESS) -> "Waveform":
        """
        Numerical derivative dy/dx (see `numerics.quadratic_derivative`).

        Args:
            unit: Unit tag for the derivative; unit-less unless given.
        """
        if self._x.size < 2:
            logger.debug("Cannot derive a waveform with fewer than two samples; returning an empty waveform.")
            return type(self).empty()
        return self._derived(numerics.quadratic_derivative(self._x, self._y), unit_y=unit)

    def integrate(self, unit: str = UNITLESS) -> Value:
        """
        Area under the waveform by the trapezoidal rule.

        Args:
            unit: Unit tag for the result; unit-less unless given.
        """
        value_type = value_type_for(self.kind)
        if self.is_empty():
            return value_type()
        return value_type(numerics.trapezoid_integral(self._x, self._y), unit)

    # --- Real/complex conversions ---

    def to_complex(self) -> "Waveform":
        """The same waveform with complex samples (zero imaginary part for real sources)."""
        return self._derived(self._y, kind=SampleKind.COMPLEX)

    def abs(self) -> "Waveform":
        """Magnitude; always a real waveform in `unit_y`."""
        return self._derived(np.abs(self._y), kind=SampleKind.REAL)

    def real(self) -> "Waveform":
        return self._derived(np.real(self._y), kind=SampleKind.REAL)

    def imag(self) -> "Waveform":
        return self._derived(np.imag(self._y), kind=SampleKind.REAL)

    def conjugate(self) -> "Waveform":
        return self._derived(np.conj(self._y))

    def negate(self) -> "Waveform":
        return self._derived(-self._y)

    @abstractmethod
    def phase_deg(self) -> "Waveform":
        """Phase of every sample in degrees, as a real waveform."""
        ...

    @abstractmethod
    def db10(self) -> "Waveform":
        """Power ratio in decibel, as a real waveform."""
        ...

    @abstractmethod
    def db20(self) -> "Waveform":
        """Amplitude ratio in decibel, as a real waveform."""
        ...

    # --- Arithmetic (left operand's units are kept) ---

    def add(self, other) -> "Waveform":
        from .arithmetic import combine
        return combine("add", self, other)

    def subtract(self, other) -> "Waveform":
        from .arithmetic import combine
        return combine("subtract", self, other)

    def multiply(self, other) -> "Waveform":
        from .arithmetic import combine
        return combine("multiply", self, other)

    def divide(self, other) -> "Waveform":
        """Elementwise division. There is no zero guard: x/0 gives inf or nan."""
        from .arithmetic import combine
        return combine("divide", self, other)

    def _binary_dunder(self, op_name: str, other, reflected: bool = False):
        from .arithmetic import combine, is_waveform_operand
        if not is_waveform_operand(other):
            return NotImplemented
        return combine(op_name, self, other, reflected=reflected)

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

    # --- Elementwise comparisons ---

    def leq(self, other) -> bool:
        """True when y <= other holds at every sample (after axis alignment)."""
        from .arithmetic import compare
        return compare("leq", self, other)

    def less(self, other) -> bool:
        """True when y < other holds at every sample (after axis alignment)."""
        from .arithmetic import compare
        return compare("less", self, other)

    def geq(self, other) -> bool:
        """True when y >= other holds at every sample (after axis alignment)."""
        from .arithmetic import compare
        return compare("geq", self, other)

    def greater(self, other) -> bool:
        """True when y > other holds at every sample (after axis alignment)."""
        from .arithmetic import compare
        return compare("greater", self, other)

    # --- Representation ---

    def _format_y(self, sample) -> str:
        if self.kind is SampleKind.COMPLEX:
            return format_complex_eng(complex(sample))
        return format_eng(float(sample))

    def __str__(self) -> str:
        return "\n".join(
            f"({format_eng(float(x))} {self._unit_x} , {self._format_y(y)} {self._unit_y})"
            for x, y in zip(self._x, self._y)
        )

    def __repr__(self) -> str:
        if self.is_empty():
            return f"{type(self).__name__}(<empty>)"
        return (
            f"{type(self).__name__}(points={self._x.size}, "
            f"x=[{format_eng(float(self._x[0]))}..{format_eng(float(self._x[-1]))}] '{self._unit_x}', "
            f"unit_y='{self._unit_y}')"
        )


def register_kind(kind: SampleKind):
    """
    A class decorator registering a concrete Waveform class as the implementation of `kind`.

    Args:
        kind: The SampleKind the decorated class represents.
    """
    def decorator(cls: Type[TWaveform]) -> Type[TWaveform]:
        if not issubclass(cls, Waveform):
            raise TypeError(f"@register_kind expects a Waveform subclass, got {cls}.")
        cls.kind = kind
        _WAVEFORM_TYPES[kind] = cls
        logger.debug(f"Class '{cls.__name__}' registered as the {kind.name} waveform type.")
        return cls

    return decorator


def waveform_type_for(kind: SampleKind) -> Type[Waveform]:
    """Returns the concrete Waveform class registered for `kind`."""
    return _WAVEFORM_TYPES[kind]
