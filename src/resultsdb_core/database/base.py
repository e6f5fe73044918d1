# src/resultsdb_core/database/base.py
"""
Defines the read-only query surface shared by every results database.

A results database maps signal names to either Values (an operating-point
result) or Waveforms (a sweep). Keys are plain names or any
`ReferenceableElectrical`, which is resolved through its netlist identifier.

QUERY CONTRACT:
1.  Lookups never raise for absent names; they return None (or False for the
    predicates).
2.  Asking a value database for a waveform, or vice versa, is a wrong-kind
    access: a WARNING is logged and None is returned. The name listings of the
    missing kind are empty sets, logged at DEBUG.
3.  A database never changes after construction.
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Set, Union

from ..values import Value
from ..waveforms import Waveform
from .references import ReferenceableElectrical, SignalKey, signal_name_of

logger = logging.getLogger(__name__)


class ResultsDatabase(ABC):
    """Abstract, name-indexed store of simulation results."""

    # --- Primitive queries, provided by subclasses ---

    @abstractmethod
    def get_value_names(self) -> Set[str]:
        """Names of all stored values."""
        ...

    @abstractmethod
    def get_wave_names(self) -> Set[str]:
        """Names of all stored waveforms."""
        ...

    @abstractmethod
    def is_value_name(self, name: str) -> bool:
        ...

    @abstractmethod
    def is_waveform_name(self, name: str) -> bool:
        ...

    @abstractmethod
    def get_value(self, key: SignalKey) -> Optional[Value]:
        ...

    @abstractmethod
    def get_waveform(self, key: SignalKey) -> Optional[Waveform]:
        ...

    @abstractmethod
    def is_empty(self) -> bool:
        ...

    # --- Derived queries ---

    def get_value_names_as_list(self) -> List[str]:
        """Sorted list of all value names."""
        return sorted(self.get_value_names())

    def get_wave_names_as_list(self) -> List[str]:
        """Sorted list of all waveform names."""
        return sorted(self.get_wave_names())

    def is_value(self, key: SignalKey) -> bool:
        return self.is_value_name(signal_name_of(key))

    def is_waveform(self, key: SignalKey) -> bool:
        return self.is_waveform_name(signal_name_of(key))

    def is_member(self, key: SignalKey) -> bool:
        """True when `key` names a value or a waveform of this database."""
        name = signal_name_of(key)
        return self.is_value_name(name) or self.is_waveform_name(name)

    def get(self, key: SignalKey) -> Optional[Union[Value, Waveform]]:
        """
        Looks `key` up as a value first, then as a waveform.

        Returns:
            The stored Value or Waveform, or None if the name is unknown.
        """
        name = signal_name_of(key)
        if self.is_value_name(name):
            return self.get_value(name)
        if self.is_waveform_name(name):
            return self.get_waveform(name)
        logger.debug(f"'{name}' is not a member of {type(self).__name__}.")
        return None

    def __contains__(self, key) -> bool:
        if not isinstance(key, (str, ReferenceableElectrical)):
            return False
        return self.is_member(key)

    def __str__(self) -> str:
        sections = []
        value_names = self.get_value_names_as_list()
        if value_names:
            sections.append("Values:" + "".join(f"\n- {name} = {self.get_value(name)}" for name in value_names))
        wave_names = self.get_wave_names_as_list()
        if wave_names:
            lines = []
            for name in wave_names:
                wave = self.get_waveform(name)
                lines.append(f"\n- {name} X={wave.unit_x} / Y={wave.unit_y} ({wave.no_of_vals()} points)")
            sections.append("Waves:" + "".join(lines))
        return "\n".join(sections)
