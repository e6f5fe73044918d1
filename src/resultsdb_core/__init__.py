# src/resultsdb_core/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.info("resultsdb_core package initialized.")

from .units import ureg, pint, Quantity, parse_unit, to_quantity
from .enums import SampleKind, ElectricalType, PROMOTION_TABLE, promote
from .formatting import format_eng, format_complex_eng
from .values import Value, RealValue, ComplexValue
from .waveforms import Waveform, RealWaveform, ComplexWaveform, AxisAlignment
from .plot import PlotSource, MappingPlot
from .database import (
    ReferenceableElectrical,
    ElectricalReference,
    ResultsDatabase,
    RealResultsDatabase,
    ComplexResultsDatabase,
    CombinedResultsDatabase,
    build_results_database,
)
from .errors import ResultsDBError, DiagnosableError, Diagnosable, UnitParseError
from .plot.exceptions import PlotSchemaError, PlotSignalError
from .database.exceptions import PlotKindError, DatabaseContentError

__all__ = [
    # Logging
    "setup_logging",
    # Units
    "ureg", "pint", "Quantity", "parse_unit", "to_quantity",
    # Kinds
    "SampleKind", "ElectricalType", "PROMOTION_TABLE", "promote",
    # Formatting
    "format_eng", "format_complex_eng",
    # Values
    "Value", "RealValue", "ComplexValue",
    # Waveforms
    "Waveform", "RealWaveform", "ComplexWaveform", "AxisAlignment",
    # Plot input
    "PlotSource", "MappingPlot",
    # Databases
    "ReferenceableElectrical", "ElectricalReference",
    "ResultsDatabase", "RealResultsDatabase", "ComplexResultsDatabase", "CombinedResultsDatabase",
    "build_results_database",
    # Errors (Actionable Diagnostics)
    "ResultsDBError", "DiagnosableError", "Diagnosable", "UnitParseError",
    "PlotSchemaError", "PlotSignalError", "PlotKindError", "DatabaseContentError",
]
