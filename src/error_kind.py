"""Error kinds and the fixed messages returned for them."""

from enum import Enum

from src.case_style import CaseStyle

ERROR_PREFIX = "Error: "
NON_EMPTY_STRING_MESSAGE = "Error: Input must be a non-empty string."


class ErrorKind(Enum):
    """Reasons a conversion can fail."""

    INVALID_TYPE = "invalid_type"
    EMPTY_INPUT = "empty_input"
    TOO_FEW_WORDS = "too_few_words"


def error_message(kind: ErrorKind, style: CaseStyle) -> str:
    """Return the caller-facing message for a failure kind and target style."""
    if kind is ErrorKind.TOO_FEW_WORDS:
        return (
            "Error: Input must contain at least two words for "
            f"{style.display_name} conversion."
        )
    return NON_EMPTY_STRING_MESSAGE


def is_error_message(text: str) -> bool:
    """Tell an error string apart from a converted result.

    Converted output never contains spaces or colons, so the prefix is
    unambiguous.
    """
    return text.startswith(ERROR_PREFIX)
