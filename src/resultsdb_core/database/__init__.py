# src/resultsdb_core/database/__init__.py
from .references import ElectricalReference, ReferenceableElectrical, SignalKey, signal_name_of
from .base import ResultsDatabase
from .kinded import KindedResultsDatabase
from .real import RealResultsDatabase
from .complex import ComplexResultsDatabase
from .combined import CombinedResultsDatabase
from .builder import build_results_database
from .exceptions import DatabaseContentError, PlotKindError

__all__ = [
    "ReferenceableElectrical",
    "ElectricalReference",
    "SignalKey",
    "signal_name_of",
    "ResultsDatabase",
    "KindedResultsDatabase",
    "RealResultsDatabase",
    "ComplexResultsDatabase",
    "CombinedResultsDatabase",
    "build_results_database",
    "DatabaseContentError",
    "PlotKindError",
]
