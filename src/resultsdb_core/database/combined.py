# src/resultsdb_core/database/combined.py
import logging
from typing import Mapping, Optional, Set, Union

from ..values import Value
from ..waveforms import Waveform
from .base import ResultsDatabase
from .complex import ComplexResultsDatabase
from .real import RealResultsDatabase
from .references import SignalKey, signal_name_of

logger = logging.getLogger(__name__)


class CombinedResultsDatabase(ResultsDatabase):
    """
    Joins one real and one complex database behind a single query surface.

    Every lookup probes the real database first, then the complex one, so a name
    present in both resolves to the real entry. Name listings are the union of
    both databases.
    """

    def __init__(self, real_db: RealResultsDatabase, complex_db: ComplexResultsDatabase):
        self._real_db = real_db
        self._complex_db = complex_db

    @classmethod
    def from_mappings(
        cls,
        real: Optional[Mapping[str, Union[Value, Waveform]]] = None,
        complex: Optional[Mapping[str, Union[Value, Waveform]]] = None,
    ) -> "CombinedResultsDatabase":
        """
        Builds both halves with `from_mapping`.

        Raises:
            DatabaseContentError: if either mapping cannot form a database.
        """
        return cls(
            RealResultsDatabase.from_mapping(real or {}),
            ComplexResultsDatabase.from_mapping(complex or {}),
        )

    @classmethod
    def empty(cls) -> "CombinedResultsDatabase":
        return cls(RealResultsDatabase.empty(), ComplexResultsDatabase.empty())

    @property
    def real_db(self) -> RealResultsDatabase:
        return self._real_db

    @property
    def complex_db(self) -> ComplexResultsDatabase:
        return self._complex_db

    def get_value_names(self) -> Set[str]:
        return self._real_db.get_value_names() | self._complex_db.get_value_names()

    def get_wave_names(self) -> Set[str]:
        return self._real_db.get_wave_names() | self._complex_db.get_wave_names()

    def is_value_name(self, name: str) -> bool:
        return self._real_db.is_value_name(name) or self._complex_db.is_value_name(name)

    def is_waveform_name(self, name: str) -> bool:
        return self._real_db.is_waveform_name(name) or self._complex_db.is_waveform_name(name)

    def get_value(self, key: SignalKey) -> Optional[Value]:
        name = signal_name_of(key)
        for database in (self._real_db, self._complex_db):
            if database.is_value_name(name):
                return database.get_value(name)
        if self.is_waveform_name(name):
            logger.warning(f"'{name}' is stored as a waveform; it cannot be read as a value.")
        return None

    def get_waveform(self, key: SignalKey) -> Optional[Waveform]:
        name = signal_name_of(key)
        for database in (self._real_db, self._complex_db):
            if database.is_waveform_name(name):
                return database.get_waveform(name)
        if self.is_value_name(name):
            logger.warning(f"'{name}' is stored as a value; it cannot be read as a waveform.")
        return None

    def get(self, key: SignalKey) -> Optional[Union[Value, Waveform]]:
        """Returns the real database's entry for `key` if it has one, else the complex one's."""
        name = signal_name_of(key)
        for database in (self._real_db, self._complex_db):
            if database.is_member(name):
                return database.get(name)
        logger.debug(f"'{name}' is not a member of {type(self).__name__}.")
        return None

    def is_empty(self) -> bool:
        return self._real_db.is_empty() and self._complex_db.is_empty()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(real={self._real_db!r}, complex={self._complex_db!r})"
