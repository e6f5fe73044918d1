# src/resultsdb_core/waveforms/arithmetic.py
"""
Elementwise arithmetic and comparisons for waveforms.

Each operator accepts a Waveform, a Value or a plain number on the right-hand
side. The result kind comes from `PROMOTION_TABLE`, so the four cells
(real-real, real-complex, complex-real, complex-complex) are all covered by
promoting both operands to the result dtype before the NumPy ufunc runs.

Waveform operands are aligned first (`Waveform.align`): when the axes differ the
right-hand waveform is resampled onto the left-hand grid. Sentinels propagate:
an empty waveform or an invalid Value operand produces the empty waveform.
"""
import logging
from typing import Callable, Dict

import numpy as np

from ..enums import SampleKind, promote
from ..values import Value, coerce_operand, is_scalar_operand
from .base import KIND_DTYPES, Waveform, waveform_type_for

logger = logging.getLogger(__name__)

WAVEFORM_OPERATORS: Dict[str, np.ufunc] = {
    "add": np.add,
    "subtract": np.subtract,
    "multiply": np.multiply,
    "divide": np.divide,
}

WAVEFORM_RELATIONS: Dict[str, Callable[[np.ndarray, np.ndarray], np.ndarray]] = {
    "leq": np.less_equal,
    "less": np.less,
    "geq": np.greater_equal,
    "greater": np.greater,
}


def is_waveform_operand(obj) -> bool:
    """True for anything a waveform can be combined with."""
    return isinstance(obj, (Waveform, Value)) or is_scalar_operand(obj)


def combine(op_name: str, lhs: Waveform, other, reflected: bool = False) -> Waveform:
    """
    Combines `lhs` elementwise with `other` using the named operator.

    The result lives on `lhs`'s x-grid and carries `lhs`'s units. With
    `reflected=True` the operands are swapped (used by `2 - wave`). Division is
    not guarded: zero divisors give inf/nan samples.

    Raises:
        TypeError: if `other` is not a Waveform, Value or number.
    """
    if isinstance(other, Waveform):
        result_kind = promote(lhs.kind, other.kind)
        if lhs.is_empty() or other.is_empty():
            logger.debug(f"'{op_name}' with an empty waveform operand; returning the empty waveform.")
            return waveform_type_for(result_kind).empty()
        rhs = lhs.align(other).y
    else:
        rhs_kind, rhs = coerce_operand(other)
        result_kind = promote(lhs.kind, rhs_kind)
        if lhs.is_empty() or (isinstance(other, Value) and other.is_nan()):
            logger.debug(f"'{op_name}' with an empty waveform or invalid value; returning the empty waveform.")
            return waveform_type_for(result_kind).empty()

    dtype = KIND_DTYPES[result_kind]
    left = np.asarray(lhs.y, dtype=dtype)
    right = np.asarray(rhs, dtype=dtype)
    if reflected:
        left, right = right, left

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        new_y = WAVEFORM_OPERATORS[op_name](left, right)

    return waveform_type_for(result_kind)._from_sorted(lhs.x, new_y, lhs.unit_x, lhs.unit_y)


def compare(relation_name: str, lhs: Waveform, other) -> bool:
    """
    Checks that the named relation holds between `lhs` and `other` at every sample.

    Ordering is only defined for real operands: a complex waveform, value or
    number on either side logs a warning and gives False. Empty waveforms and
    invalid values also give False.
    """
    if isinstance(other, Waveform):
        rhs_kind = other.kind
    else:
        rhs_kind, payload = coerce_operand(other)

    if lhs.kind is SampleKind.COMPLEX or rhs_kind is SampleKind.COMPLEX:
        logger.warning(
            f"Ordering comparison '{relation_name}' is not defined for complex waveforms or values; returning False."
        )
        return False

    if lhs.is_empty():
        logger.debug(f"'{relation_name}' on an empty waveform; returning False.")
        return False

    if isinstance(other, Waveform):
        if other.is_empty():
            logger.debug(f"'{relation_name}' against an empty waveform; returning False.")
            return False
        rhs = lhs.align(other).y
    else:
        rhs = payload

    with np.errstate(invalid="ignore"):
        return bool(np.all(WAVEFORM_RELATIONS[relation_name](lhs.y, rhs)))
