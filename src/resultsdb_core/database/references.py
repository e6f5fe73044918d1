# src/resultsdb_core/database/references.py
"""
Symbolic references to circuit quantities.

Analysis code usually knows *what* it wants (the voltage on net `out`, the
current through terminal `M1:d`) rather than the exact signal name the
simulator wrote. Any object implementing `ReferenceableElectrical` can be used
as a database key; the database only reads `get_netlist_identifier()`.
"""
from dataclasses import dataclass
from typing import Protocol, Sequence, Tuple, Union, runtime_checkable

from ..enums import ElectricalType


@runtime_checkable
class ReferenceableElectrical(Protocol):
    """Anything that can name a signal in a results database."""

    def get_netlist_identifier(self) -> str:
        """The signal name as written by the simulator."""
        ...

    def get_address(self) -> Sequence[str]:
        """The hierarchical instance path of the referenced object."""
        ...

    def get_type(self) -> ElectricalType:
        ...


@dataclass(frozen=True)
class ElectricalReference:
    """Plain, immutable `ReferenceableElectrical`."""
    identifier: str
    address: Tuple[str, ...] = ()
    type: ElectricalType = ElectricalType.NET

    def __post_init__(self):
        object.__setattr__(self, "address", tuple(self.address))

    def get_netlist_identifier(self) -> str:
        return self.identifier

    def get_address(self) -> Tuple[str, ...]:
        return self.address

    def get_type(self) -> ElectricalType:
        return self.type


#: A database key: a signal name or a symbolic reference.
SignalKey = Union[str, ReferenceableElectrical]


def signal_name_of(key: SignalKey) -> str:
    """
    Resolves a database key to the signal name it denotes.

    Raises:
        TypeError: if `key` is neither a string nor a ReferenceableElectrical.
    """
    if isinstance(key, str):
        return key
    if isinstance(key, ReferenceableElectrical):
        return key.get_netlist_identifier()
    raise TypeError(f"Database keys must be strings or ReferenceableElectrical objects, got {type(key).__name__}.")
