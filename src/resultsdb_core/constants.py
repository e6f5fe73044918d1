# src/resultsdb_core/constants.py
import logging
from typing import Dict

logger = logging.getLogger(__name__)

# --- Engineering Notation ---

#: SI magnitude prefixes keyed by their power-of-ten exponent.
SI_PREFIXES: Dict[int, str] = {
    24: "Y",
    21: "Z",
    18: "E",
    15: "P",
    12: "T",
    9: "G",
    6: "M",
    3: "k",
    0: "",
    -3: "m",
    -6: "u",
    -9: "n",
    -12: "p",
    -15: "f",
    -18: "a",
    -21: "z",
    -24: "y",
}

#: Offset subtracted from log10(|n|)/3 before rounding to the prefix exponent.
#: Shifts the switch-over point so that e.g. 400 stays "400" while 500 becomes "0.5k".
PREFIX_ROUNDING_OFFSET: float = 0.39

#: Significant decimal digits used when a float is converted for formatting (IEEE decimal64).
FORMAT_SIGNIFICANT_DIGITS: int = 16

# --- Unit Tags ---

#: Unit tag attached to dB10/dB20 waveforms.
DECIBEL_UNIT: str = "dB"

#: Unit tag attached to phase waveforms and values.
DEGREE_UNIT: str = "deg"

#: Unit tag for results without a physical unit (derivatives, integrals, trig functions).
UNITLESS: str = ""

logger.debug("Defined core constants: SI_PREFIXES, PREFIX_ROUNDING_OFFSET, FORMAT_SIGNIFICANT_DIGITS")
