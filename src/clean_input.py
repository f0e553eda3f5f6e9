"""Logic for stripping disallowed characters from input text."""

from src.char_classes import is_allowed_char


def clean_input(text: str) -> str:
    """Drop everything except ASCII letters, digits, space, hyphen and underscore."""
    return "".join(ch for ch in text if is_allowed_char(ch))
