# src/resultsdb_core/values/__init__.py
"""
Unit-tagged scalar values.

`Value` is the abstract base of the two-case union `RealValue | ComplexValue`.
"""
from .base import Value, register_kind, value_type_for
from .real import RealValue
from .complex import ComplexValue
from .operations import coerce_operand, is_scalar_operand

__all__ = [
    "Value",
    "RealValue",
    "ComplexValue",
    "register_kind",
    "value_type_for",
    "coerce_operand",
    "is_scalar_operand",
]
