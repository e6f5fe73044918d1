# src/resultsdb_core/database/real.py
from typing import Optional

from ..enums import SampleKind
from ..values import RealValue
from ..waveforms import RealWaveform
from .kinded import KindedResultsDatabase
from .references import SignalKey


class RealResultsDatabase(KindedResultsDatabase):
    """Results of a real-valued analysis (DC operating point, DC sweep, transient)."""
    kind = SampleKind.REAL

    def get_real_value(self, key: SignalKey) -> Optional[RealValue]:
        return self.get_value(key)

    def get_real_waveform(self, key: SignalKey) -> Optional[RealWaveform]:
        return self.get_waveform(key)
