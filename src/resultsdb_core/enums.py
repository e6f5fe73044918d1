# src/resultsdb_core/enums.py
from enum import Enum, auto


class SampleKind(Enum):
    """Payload kind of a Value or Waveform. Every binary operator dispatches on a pair of these."""
    REAL = auto()
    COMPLEX = auto()


class ElectricalType(Enum):
    """What a referenceable electrical identifier points at in a netlist."""
    NET = auto()       # voltage in volt
    TERMINAL = auto()  # current in ampere
    OPPOINT = auto()   # operating point quantity


#: Exhaustive promotion table for binary operators on Values and Waveforms.
#: Real operands meeting a complex operand are promoted (zero imaginary part),
#: so every combination reduces to real-real or complex-complex arithmetic.
PROMOTION_TABLE = {
    (SampleKind.REAL, SampleKind.REAL): SampleKind.REAL,
    (SampleKind.REAL, SampleKind.COMPLEX): SampleKind.COMPLEX,
    (SampleKind.COMPLEX, SampleKind.REAL): SampleKind.COMPLEX,
    (SampleKind.COMPLEX, SampleKind.COMPLEX): SampleKind.COMPLEX,
}


def promote(lhs: SampleKind, rhs: SampleKind) -> SampleKind:
    """Returns the kind a binary operation between `lhs` and `rhs` produces."""
    return PROMOTION_TABLE[(lhs, rhs)]
