# src/resultsdb_core/database/kinded.py
"""
Shared implementation of the single-kind (real or complex) results databases.

A single-kind database is in exactly one of three modes, fixed at construction:

*   **values**: an operating-point result, `name -> Value`.
*   **waveforms**: a swept result, `name -> Waveform` on the reference axis.
*   **empty**: neither map present.

Every stored entry has the database's own `kind`. Concrete subclasses only set
`kind` and add typed accessors.
"""
import logging
from types import MappingProxyType
from typing import ClassVar, Mapping, Optional, Set, Type, TypeVar, Union

import numpy as np

from ..enums import SampleKind
from ..plot import PlotSource
from ..values import Value, value_type_for
from ..waveforms import Waveform, waveform_type_for
from .base import ResultsDatabase
from .exceptions import DatabaseContentError, PlotKindError
from .references import SignalKey, signal_name_of

logger = logging.getLogger(__name__)

TDatabase = TypeVar("TDatabase", bound="KindedResultsDatabase")


class KindedResultsDatabase(ResultsDatabase):
    """A results database whose entries all share one `SampleKind`."""
    kind: ClassVar[SampleKind]

    def __init__(
        self,
        values: Optional[Mapping[str, Value]] = None,
        waveforms: Optional[Mapping[str, Waveform]] = None,
    ):
        """
        Args:
            values: name -> Value map of an operating-point result.
            waveforms: name -> Waveform map of a swept result.

        At most one of the two maps may be given.

        Raises:
            DatabaseContentError: if both maps are given, or an entry has the wrong type or kind.
        """
        db_name = type(self).__name__
        if values is not None and waveforms is not None:
            raise DatabaseContentError(
                database=db_name,
                details="A database holds either values or waveforms, not both.",
                offending_names=sorted(set(values) | set(waveforms)),
            )
        self._values = None if values is None else self._checked(values, Value)
        self._waves = None if waveforms is None else self._checked(waveforms, Waveform)
        logger.debug(f"Built {self!r}.")

    def _checked(self, entries: Mapping[str, object], base: type) -> Mapping[str, object]:
        wrong = [
            str(name) for name, entry in entries.items()
            if not isinstance(name, str) or not isinstance(entry, base) or entry.kind is not self.kind
        ]
        if wrong:
            raise DatabaseContentError(
                database=type(self).__name__,
                details=f"Every entry must be a {self.kind.name.lower()} {base.__name__} keyed by its signal name.",
                offending_names=wrong,
            )
        return MappingProxyType(dict(entries))

    # --- Construction ---

    @classmethod
    def empty(cls: Type[TDatabase]) -> TDatabase:
        return cls()

    @classmethod
    def from_values(cls: Type[TDatabase], values: Mapping[str, Value]) -> TDatabase:
        """Builds an operating-point database."""
        return cls(values=values)

    @classmethod
    def from_waveforms(cls: Type[TDatabase], waveforms: Mapping[str, Waveform]) -> TDatabase:
        """Builds a swept database."""
        return cls(waveforms=waveforms)

    @classmethod
    def from_mapping(cls: Type[TDatabase], entries: Mapping[str, Union[Value, Waveform]]) -> TDatabase:
        """
        Builds a database, inferring the mode from the entries.

        An empty mapping gives the empty database.

        Raises:
            DatabaseContentError: if values and waveforms are mixed, or an entry is neither.
        """
        if not entries:
            return cls.empty()
        if all(isinstance(entry, Value) for entry in entries.values()):
            return cls.from_values(entries)
        if all(isinstance(entry, Waveform) for entry in entries.values()):
            return cls.from_waveforms(entries)
        raise DatabaseContentError(
            database=cls.__name__,
            details="Cannot infer the database mode: the mapping mixes values and waveforms (or holds other objects).",
            offending_names=[str(name) for name, entry in entries.items() if not isinstance(entry, Value)],
        )

    @classmethod
    def from_plot(cls: Type[TDatabase], plot: PlotSource) -> TDatabase:
        """
        Builds a database from a decoded simulator plot.

        A plot with a single point gives an operating-point database holding every
        signal (reference included). Otherwise every non-reference signal becomes a
        waveform over the reference signal, whose real part is the shared x-axis.

        Raises:
            PlotKindError: if a real database is asked to hold complex samples.
        """
        names = sorted(plot.signal_names())
        samples = {name: np.asarray(plot.samples(name)) for name in names}

        if cls.kind is SampleKind.REAL:
            for name in names:
                if np.iscomplexobj(samples[name]):
                    raise PlotKindError(
                        database=cls.__name__,
                        signal=name,
                        details=f"Signal '{name}' carries complex samples; a real database can only hold real ones.",
                    )

        if plot.point_count() == 1:
            value_type = value_type_for(cls.kind)
            return cls.from_values({name: value_type(samples[name][0], plot.unit(name)) for name in names})

        wave_type = waveform_type_for(cls.kind)
        reference = plot.reference_signal_name()
        x = np.real(samples[reference])
        unit_x = plot.unit(reference)
        return cls.from_waveforms({
            name: wave_type(x, samples[name], unit_x, plot.unit(name))
            for name in names
            if name != reference
        })

    # --- Queries ---

    def get_value_names(self) -> Set[str]:
        if self._values is None:
            logger.debug(f"{type(self).__name__} holds no values; returning an empty name set.")
            return set()
        return set(self._values)

    def get_wave_names(self) -> Set[str]:
        if self._waves is None:
            logger.debug(f"{type(self).__name__} holds no waveforms; returning an empty name set.")
            return set()
        return set(self._waves)

    def is_value_name(self, name: str) -> bool:
        return self._values is not None and name in self._values

    def is_waveform_name(self, name: str) -> bool:
        return self._waves is not None and name in self._waves

    def get_value(self, key: SignalKey) -> Optional[Value]:
        """The stored value, or None if absent or if this database holds waveforms."""
        name = signal_name_of(key)
        if self._values is None:
            if self._waves is not None:
                logger.warning(
                    f"{type(self).__name__} holds waveforms only; '{name}' cannot be read as a value."
                )
            return None
        return self._values.get(name)

    def get_waveform(self, key: SignalKey) -> Optional[Waveform]:
        """The stored waveform, or None if absent or if this database holds values."""
        name = signal_name_of(key)
        if self._waves is None:
            if self._values is not None:
                logger.warning(
                    f"{type(self).__name__} holds values only; '{name}' cannot be read as a waveform."
                )
            return None
        return self._waves.get(name)

    def is_empty(self) -> bool:
        return not self._values and not self._waves

    def _mode(self) -> str:
        if self._values is not None:
            return f"values={len(self._values)}"
        if self._waves is not None:
            return f"waveforms={len(self._waves)}"
        return "<empty>"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._mode()})"
