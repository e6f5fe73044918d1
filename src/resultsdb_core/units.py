# src/resultsdb_core/units.py
import logging
from typing import Union

import numpy as np
import pint

from .constants import DECIBEL_UNIT, DEGREE_UNIT, UNITLESS
from .errors import UnitParseError

logger = logging.getLogger(__name__)
ureg = pint.UnitRegistry()
Quantity = ureg.Quantity
logger.debug("Pint Unit Registry initialized.")

# Unit tags as written by circuit simulators that pint does not parse as-is.
# Keys are compared case-sensitively; the values are pint expressions.
SIMULATOR_UNIT_ALIASES = {
    "Volt": "volt",
    "Amp": "ampere",
    "Sec": "second",
    "sec": "second",
    "Hertz": "hertz",
    DEGREE_UNIT: "degree",
    DECIBEL_UNIT: "decibel",
}


def parse_unit(unit: str) -> pint.Unit:
    """
    Resolves a free-form unit tag to a pint unit.

    An empty tag means dimensionless. Simulator spellings listed in
    SIMULATOR_UNIT_ALIASES are mapped before parsing.

    Raises:
        UnitParseError: if pint does not know the unit.
    """
    if unit is None or unit.strip() == UNITLESS:
        return ureg.dimensionless
    expression = SIMULATOR_UNIT_ALIASES.get(unit.strip(), unit.strip())
    try:
        return ureg.parse_units(expression)
    except (pint.errors.PintError, ValueError, TypeError, AttributeError) as e:
        raise UnitParseError(unit=unit, details=str(e)) from e


def to_quantity(magnitude: Union[float, complex, np.ndarray], unit: str) -> Quantity:
    """Wraps a raw magnitude (scalar or array) in a pint Quantity for the given unit tag."""
    return Quantity(magnitude, parse_unit(unit))
