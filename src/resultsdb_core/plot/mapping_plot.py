# src/resultsdb_core/plot/mapping_plot.py
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Set

import cerberus
import numpy as np

from .exceptions import PlotSchemaError, PlotSignalError

logger = logging.getLogger(__name__)


class PlotValidator(cerberus.Validator):
    """Cerberus validator with the cross-field rules of a plot mapping."""
    types_mapping = cerberus.Validator.types_mapping.copy()
    types_mapping["complex"] = cerberus.TypeDefinition("complex", (complex,), ())

    def _validate_names_a_signal(self, constraint: bool, field: str, value: Any):
        """
        Validates that the field's value is one of the keys of the root 'signals' mapping.
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if not constraint or not isinstance(value, str):
            return
        signals = self.root_document.get("signals")
        if isinstance(signals, Mapping) and value not in signals:
            self._error(field, f"Reference '{value}' is not one of the signals: {sorted(map(str, signals))}")

    def _validate_equal_sample_lengths(self, constraint: bool, field: str, value: Any):
        """
        Validates that every signal of the mapping carries the same number of samples.
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if not constraint or not isinstance(value, Mapping):
            return
        lengths = {
            name: len(entry["samples"])
            for name, entry in value.items()
            if isinstance(entry, Mapping) and isinstance(entry.get("samples"), (list, tuple))
        }
        if len(set(lengths.values())) > 1:
            self._error(field, f"All signals must have the same number of samples, got {dict(sorted(lengths.items()))}")


def _plain_document(raw: Mapping) -> Dict:
    """Copies `raw`, turning NumPy sample arrays into lists so cerberus can type-check them."""
    document = dict(raw)
    signals = document.get("signals")
    if isinstance(signals, Mapping):
        document["signals"] = {
            name: (
                {**entry, "samples": entry["samples"].tolist()}
                if isinstance(entry, Mapping) and isinstance(entry.get("samples"), np.ndarray)
                else entry
            )
            for name, entry in signals.items()
        }
    return document


def _read_only(samples) -> np.ndarray:
    array = np.array(samples)
    array = array.astype(np.complex128 if np.iscomplexobj(array) else np.float64)
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class MappingPlot:
    """
    Immutable in-memory `PlotSource` built from plain Python data.

    Use `MappingPlot.from_mapping` to build one from a raw mapping of the form
    `{"reference": str, "signals": {name: {"unit": str, "samples": [...]}}}`.
    The sample arrays are stored read-only; a signal whose samples contain a
    complex number is stored as complex128, every other signal as float64.
    """
    reference: str
    units: Mapping[str, str]
    signals: Mapping[str, np.ndarray] = field(repr=False)

    _schema = {
        "reference": {"type": "string", "required": True, "empty": False, "names_a_signal": True},
        "signals": {
            "type": "dict",
            "required": True,
            "minlength": 1,
            "equal_sample_lengths": True,
            "keysrules": {"type": "string", "empty": False},
            "valuesrules": {
                "type": "dict",
                "schema": {
                    "unit": {"type": "string", "required": False, "default": ""},
                    "samples": {
                        "type": "list",
                        "required": True,
                        "minlength": 1,
                        "schema": {"type": ["number", "complex"]},
                    },
                },
            },
        },
    }

    @classmethod
    def from_mapping(cls, raw: Mapping) -> "MappingPlot":
        """
        Validates a raw plot mapping and builds the plot.

        Raises:
            PlotSchemaError: if `raw` violates the plot schema.
        """
        if not isinstance(raw, Mapping):
            raise PlotSchemaError({"document": [f"must be a mapping, got {type(raw).__name__}"]})

        validator = PlotValidator(cls._schema)
        validator.allow_unknown = False
        if not validator.validate(_plain_document(raw)):
            raise PlotSchemaError(validator.errors)

        document = validator.document
        signals = {name: _read_only(entry["samples"]) for name, entry in document["signals"].items()}
        units = {name: entry.get("unit", "") for name, entry in document["signals"].items()}
        plot = cls(
            reference=document["reference"],
            units=MappingProxyType(units),
            signals=MappingProxyType(signals),
        )
        logger.debug(
            f"Built plot with {len(signals)} signal(s), {plot.point_count()} point(s), reference '{plot.reference}'."
        )
        return plot

    def _require(self, name: str):
        if name not in self.signals:
            raise PlotSignalError(signal=name, available=list(self.signals))

    def point_count(self) -> int:
        return self.signals[self.reference].size

    def signal_names(self) -> Set[str]:
        return set(self.signals)

    def reference_signal_name(self) -> str:
        return self.reference

    def unit(self, name: str) -> str:
        self._require(name)
        return self.units[name]

    def samples(self, name: str) -> np.ndarray:
        self._require(name)
        return self.signals[name]

    def is_complex(self) -> bool:
        """True when at least one signal carries complex samples."""
        return any(np.iscomplexobj(samples) for samples in self.signals.values())
