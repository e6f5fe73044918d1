# src/resultsdb_core/plot/exceptions.py
"""
Diagnosable errors raised while building or querying an in-memory plot.

`PlotSchemaError` covers structural problems of the raw mapping found by the
cerberus validator; `PlotSignalError` covers lookups of a signal the plot does
not contain. Both derive from `DiagnosableError` and render their own report.
"""
from dataclasses import dataclass
from typing import Any, Dict, List

from ..errors import DiagnosableError, format_diagnostic_report


def _flatten_errors(errors: Dict[str, Any], prefix: str = "") -> List[str]:
    """Turns cerberus' nested error tree into 'field.path: message' lines."""
    lines = []
    for field, messages in sorted(errors.items(), key=lambda item: str(item[0])):
        path = f"{prefix}.{field}" if prefix else str(field)
        for message in messages:
            if isinstance(message, dict):
                lines.extend(_flatten_errors(message, path))
            else:
                lines.append(f"{path}: {message}")
    return lines


@dataclass(eq=False)
class PlotSchemaError(DiagnosableError):
    """The raw plot mapping does not match the required structure."""
    errors: Dict[str, Any]

    def __str__(self):
        return "Plot mapping failed schema validation:\n" + "\n".join(
            f"  - {line}" for line in _flatten_errors(self.errors)
        )

    def get_diagnostic_report(self) -> str:
        lines = _flatten_errors(self.errors)
        details = (
            "The raw plot mapping does not conform to the required schema.\n"
            f"See details for {len(lines)} issue(s) below:\n\n" + "\n".join(f"  - {line}" for line in lines)
        )
        return format_diagnostic_report(
            error_type="Plot Schema Error",
            details=details,
            suggestion=(
                "Provide {'reference': <name>, 'signals': {<name>: {'unit': <str>, 'samples': [...]}}}. "
                "The reference must name one of the signals and every signal needs the same, non-zero number of samples."
            ),
            context={}
        )


@dataclass(eq=False)
class PlotSignalError(DiagnosableError):
    """A signal was requested that the plot does not contain."""
    signal: str
    available: List[str]

    def __str__(self):
        return f"Plot has no signal named '{self.signal}'."

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unknown Plot Signal",
            details=f"Signal '{self.signal}' is not part of this plot.\nAvailable signals: {sorted(self.available)}",
            suggestion="Check the spelling of the signal name, or query signal_names() first.",
            context={'signal': self.signal}
        )
