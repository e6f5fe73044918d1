# src/resultsdb_core/database/complex.py
from typing import Optional

from ..enums import SampleKind
from ..values import ComplexValue
from ..waveforms import ComplexWaveform
from .kinded import KindedResultsDatabase
from .references import SignalKey


class ComplexResultsDatabase(KindedResultsDatabase):
    """
    Results of a complex-valued analysis, typically an AC sweep over frequency.

    Real samples in the source plot are stored with a zero imaginary part.
    """
    kind = SampleKind.COMPLEX

    def get_complex_value(self, key: SignalKey) -> Optional[ComplexValue]:
        return self.get_value(key)

    def get_complex_waveform(self, key: SignalKey) -> Optional[ComplexWaveform]:
        return self.get_waveform(key)
