# src/resultsdb_core/database/builder.py
import logging

import numpy as np

from ..plot import PlotSource
from .kinded import KindedResultsDatabase
from .complex import ComplexResultsDatabase
from .real import RealResultsDatabase

logger = logging.getLogger(__name__)


def build_results_database(plot: PlotSource) -> KindedResultsDatabase:
    """
    Builds the database matching the sample kind of `plot`.

    A plot with at least one complex signal gives a `ComplexResultsDatabase`
    (real signals are promoted); any other plot gives a `RealResultsDatabase`.

    Raises:
        TypeError: if `plot` does not implement the PlotSource protocol.
    """
    if not isinstance(plot, PlotSource):
        raise TypeError(f"Expected a PlotSource, got {type(plot).__name__}.")

    complex_signals = sorted(name for name in plot.signal_names() if np.iscomplexobj(plot.samples(name)))
    if complex_signals:
        logger.debug(f"Complex signal(s) {complex_signals} found; building a ComplexResultsDatabase.")
        return ComplexResultsDatabase.from_plot(plot)
    return RealResultsDatabase.from_plot(plot)
