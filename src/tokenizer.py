"""Logic for splitting free-form text into word tokens."""

import logging

from src.char_classes import TRIM_WHITESPACE, is_separator
from src.clean_input import clean_input
from src.word_case_error import EmptyInputError, InvalidTypeError, TooFewWordsError
from src.word_token import WordToken

logger = logging.getLogger(__name__)

MIN_WORDS = 2


class Tokenizer:
    """Splits space, hyphen and underscore separated text into words."""

    def tokenize(self, value: object) -> list[WordToken]:
        """Validate ``value`` and split it into at least two word tokens.

        Raises:
            InvalidTypeError: ``value`` is not a string.
            EmptyInputError: ``value`` is blank after trimming.
            TooFewWordsError: fewer than two words survive cleaning.

        """
        if not isinstance(value, str):
            raise InvalidTypeError(value)
        if not value.strip(TRIM_WHITESPACE):
            raise EmptyInputError

        tokens = [WordToken(word) for word in self._split_words(clean_input(value))]
        logger.debug("Split %r into %d token(s)", value, len(tokens))
        if len(tokens) < MIN_WORDS:
            raise TooFewWordsError(len(tokens))
        return tokens

    def _split_words(self, text: str) -> list[str]:
        """Split on runs of separators, skipping empty fragments.

        A run of separators of any length and mix counts as one boundary, so
        leading, trailing and doubled separators never produce empty words.
        """
        words = []
        start = None
        for i, ch in enumerate(text):
            if is_separator(ch):
                if start is not None:
                    words.append(text[start:i])
                    start = None
            elif start is None:
                start = i
        if start is not None:
            words.append(text[start:])
        return words
