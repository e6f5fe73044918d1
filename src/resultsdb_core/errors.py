# src/resultsdb_core/errors.py
import logging
from dataclasses import dataclass
from abc import abstractmethod
from typing import Any, Dict, Protocol
from typing import runtime_checkable

logger = logging.getLogger(__name__)

# --- User-Facing Exception Hierarchy ---

class ResultsDBError(Exception):
    """Base class for all custom, user-facing errors in resultsdb_core."""
    pass


# --- Diagnostic Protocol & Base Exception ---

@runtime_checkable
class Diagnosable(Protocol):
    """
    A protocol for exceptions that can generate their own diagnostic report.
    Code that only needs the report can work with any diagnosable object
    without knowing its concrete type.
    """
    def get_diagnostic_report(self) -> str:
        """Generates a complete, user-friendly, multi-line report string."""
        ...


class DiagnosableError(ResultsDBError, Diagnosable):
    """
    Common concrete base class for every diagnosable error raised by the package.

    It is a real `Exception` subclass, so it can be used in `except` clauses, and it
    declares `get_diagnostic_report` abstract, so a subclass that forgets to provide
    a report cannot be instantiated.
    """
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        raise NotImplementedError


# --- Stateless Formatting Utility ---

def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    Formats the multi-line report string shared by all diagnosable errors.

    Args:
        error_type: The high-level category of the error (e.g., "Plot Schema Error").
        details: A detailed, potentially multi-line description of the problem.
        suggestion: Actionable advice for the user to resolve the issue.
        context: Contextual information. Recognised keys are 'signal', 'reference',
                 'unit' and 'database'.

    Returns:
        A formatted report string ready for display.
    """
    lines = [
        "\n",
        "============== resultsdb_core: Actionable Diagnostic Report ==============",
        f"Error Type:     {error_type}",
    ]
    if signal := context.get('signal'):
        lines.append(f"Signal:         {signal}")
    if reference := context.get('reference'):
        lines.append(f"Reference:      {reference}")
    if unit := context.get('unit'):
        lines.append(f"Unit:           '{unit}'")
    if database := context.get('database'):
        lines.append(f"Database:       {database}")

    lines.append("\nDetails:")
    for line in details.splitlines():
        lines.append(f"  {line}")

    if suggestion:
        lines.append("\nSuggestion:")
        for line in suggestion.splitlines():
            lines.append(f"  {line}")

    lines.append("==========================================================================")
    return "\n".join(lines)


# --- Cross-Cutting Errors ---

@dataclass(eq=False)
class UnitParseError(DiagnosableError):
    """Raised when a unit tag cannot be interpreted by the pint unit registry."""
    unit: str
    details: str

    def __str__(self):
        return f"Cannot interpret unit '{self.unit}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unit Parse Error",
            details=self.details,
            suggestion="Unit tags are free-form strings. Only tags understood by pint can be converted to quantities; keep working with the raw magnitude otherwise.",
            context={'unit': self.unit}
        )
