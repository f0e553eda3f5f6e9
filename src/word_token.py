"""Data model for a single word extracted from input text."""

from dataclasses import dataclass

from src.char_classes import is_upper_letter


@dataclass(frozen=True)
class WordToken:
    """A contiguous run of word characters between separators."""

    text: str

    @property
    def is_acronym(self) -> bool:
        """Two or more characters, all of them uppercase letters."""
        return len(self.text) >= 2 and all(is_upper_letter(c) for c in self.text)
