"""Exceptions raised while splitting input into words."""

from src.error_kind import ErrorKind


class WordCaseError(Exception):
    """Base class for tokenizer failures; ``kind`` selects the message."""

    kind: ErrorKind


class InvalidTypeError(WordCaseError):
    """Input is not a string."""

    kind = ErrorKind.INVALID_TYPE

    def __init__(self, value: object) -> None:
        """Record the offending type name."""
        super().__init__(f"Expected str, got {type(value).__name__}")


class EmptyInputError(WordCaseError):
    """Input is blank after trimming."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(self) -> None:
        """Build the fixed message."""
        super().__init__("Input is empty after trimming")


class TooFewWordsError(WordCaseError):
    """Fewer than two words remain after cleaning and splitting."""

    kind = ErrorKind.TOO_FEW_WORDS

    def __init__(self, count: int) -> None:
        """Record how many words were found."""
        self.count = count
        super().__init__(f"Found {count} word(s), need at least 2")
