# src/resultsdb_core/plot/__init__.py
from .contracts import PlotSource
from .mapping_plot import MappingPlot, PlotValidator
from .exceptions import PlotSchemaError, PlotSignalError

__all__ = [
    "PlotSource",
    "MappingPlot",
    "PlotValidator",
    "PlotSchemaError",
    "PlotSignalError",
]
