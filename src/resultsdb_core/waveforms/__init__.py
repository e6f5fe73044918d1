# src/resultsdb_core/waveforms/__init__.py
"""
Unit-tagged sampled functions.

`Waveform` is the abstract base of the two-case union `RealWaveform | ComplexWaveform`.
Importing this package registers both concrete classes for their `SampleKind`.
"""
from .base import AxisAlignment, Waveform, register_kind, waveform_type_for
from .real import RealWaveform
from .complex import ComplexWaveform
from .arithmetic import combine, compare, is_waveform_operand

__all__ = [
    "Waveform",
    "RealWaveform",
    "ComplexWaveform",
    "AxisAlignment",
    "register_kind",
    "waveform_type_for",
    "combine",
    "compare",
    "is_waveform_operand",
]
