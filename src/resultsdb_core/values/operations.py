# src/resultsdb_core/values/operations.py
"""
Scalar arithmetic for Values, dispatched through the promotion table.

Every operator accepts a Value or a plain number on the right-hand side. The
operand pair is reduced to (kind, payload) tuples, the result kind is looked up
in `PROMOTION_TABLE` and the payloads are combined with Python arithmetic.
"""
import cmath
import logging
import math
import operator
from decimal import Decimal
from typing import Callable, Dict, Tuple, Union

import numpy as np

from ..enums import SampleKind, promote
from .base import Value, value_type_for

logger = logging.getLogger(__name__)

Payload = Union[float, complex]

SCALAR_OPERATORS: Dict[str, Callable[[Payload, Payload], Payload]] = {
    "add": operator.add,
    "subtract": operator.sub,
    "multiply": operator.mul,
    "divide": operator.truediv,
}


def is_scalar_operand(obj) -> bool:
    """True for plain numbers accepted as operands (bool excluded)."""
    if isinstance(obj, (bool, np.bool_)):
        return False
    return isinstance(obj, (int, float, complex, Decimal, np.integer, np.floating, np.complexfloating))


def coerce_operand(obj) -> Tuple[SampleKind, Payload]:
    """
    Reduces a Value or plain number to its kind and raw payload.

    Raises:
        TypeError: for anything that is neither a Value nor a number.
    """
    if isinstance(obj, Value):
        return obj.kind, obj.payload
    if not is_scalar_operand(obj):
        raise TypeError(f"Unsupported operand of type {type(obj).__name__}.")
    if isinstance(obj, (complex, np.complexfloating)):
        return SampleKind.COMPLEX, complex(obj)
    return SampleKind.REAL, float(obj)


def payload_is_nan(payload: Payload) -> bool:
    if isinstance(payload, complex):
        return cmath.isnan(payload)
    return math.isnan(payload)


def combine_values(op_name: str, lhs: Value, other, reflected: bool = False) -> Value:
    """
    Combines `lhs` with `other` using the named operator.

    The result carries `lhs.unit`. An invalid operand on either side, or an exact
    zero divisor, yields the invalid sentinel of the promoted kind. With
    `reflected=True` the payloads are swapped (used by `2 - value`).
    """
    rhs_kind, rhs_payload = coerce_operand(other)
    result_type = value_type_for(promote(lhs.kind, rhs_kind))

    if lhs.is_nan() or payload_is_nan(rhs_payload):
        logger.debug(f"'{op_name}' on an invalid operand; returning the invalid sentinel.")
        return result_type()

    left, right = (rhs_payload, lhs.payload) if reflected else (lhs.payload, rhs_payload)
    if op_name == "divide" and right == 0:
        logger.debug("Division by exact zero; returning the invalid sentinel.")
        return result_type()

    return result_type(SCALAR_OPERATORS[op_name](left, right), lhs.unit)
