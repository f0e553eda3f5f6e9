"""Data model for the outcome of a single conversion."""

from dataclasses import dataclass

from src.case_style import CaseStyle
from src.error_kind import ErrorKind


@dataclass(frozen=True)
class ConversionResult:
    """Converted text, or the fixed error message when ``error`` is set."""

    style: CaseStyle
    text: str
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        """True when the conversion succeeded."""
        return self.error is None
