# src/resultsdb_core/database/exceptions.py
"""
Diagnosable errors raised while *building* a results database.

Queries never raise: absent names return None and wrong-kind access logs a
warning. Only constructing a database from unsuitable input is an error.
"""
from dataclasses import dataclass, field
from typing import List

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass(eq=False)
class PlotKindError(DiagnosableError):
    """A plot carries samples of a kind the target database cannot hold."""
    database: str
    signal: str
    details: str

    def __str__(self):
        return f"{self.database} cannot hold signal '{self.signal}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Plot Kind Mismatch",
            details=self.details,
            suggestion="Use build_results_database(plot), which picks the complex database when any signal is complex.",
            context={'signal': self.signal, 'database': self.database}
        )


@dataclass(eq=False)
class DatabaseContentError(DiagnosableError):
    """The entries given to a database constructor cannot form a valid database."""
    database: str
    details: str
    offending_names: List[str] = field(default_factory=list)

    def __str__(self):
        names = f" (entries: {sorted(self.offending_names)})" if self.offending_names else ""
        return f"Invalid content for {self.database}: {self.details}{names}"

    def get_diagnostic_report(self) -> str:
        details = self.details
        if self.offending_names:
            details += "\nOffending entries: " + ", ".join(sorted(self.offending_names))
        return format_diagnostic_report(
            error_type="Database Content Error",
            details=details,
            suggestion=(
                "A database holds either only values (operating point) or only waveforms (sweep), "
                "all of the database's own kind. Split mixed content over several databases, "
                "or use a CombinedResultsDatabase for real and complex results."
            ),
            context={'database': self.database}
        )
