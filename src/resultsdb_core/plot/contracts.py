# src/resultsdb_core/plot/contracts.py
"""
Defines the contract between a simulator-output decoder and the results databases.

A "plot" is one analysis result of a simulator run: a set of named signals that
all share the same number of sample points, one of which is the sweep
("reference") variable. The databases only ever talk to a plot through the
`PlotSource` protocol, so any decoder can feed them without inheriting from a
package class.
"""
from typing import Protocol, Set, runtime_checkable

import numpy as np


@runtime_checkable
class PlotSource(Protocol):
    """
    Read-only view on one decoded simulator plot.

    CONTRACT:
    1.  `point_count()` is the common length of every `samples(name)` array.
        A count of 1 marks an operating-point result, anything larger a sweep.
    2.  `reference_signal_name()` is a member of `signal_names()`.
    3.  `samples(name)` returns a 1-D float or complex array.
    """

    def point_count(self) -> int:
        ...

    def signal_names(self) -> Set[str]:
        ...

    def reference_signal_name(self) -> str:
        ...

    def unit(self, name: str) -> str:
        ...

    def samples(self, name: str) -> np.ndarray:
        ...
