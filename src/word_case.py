"""Public word-case conversion functions.

Every entry point returns a string. Invalid input never raises: the caller
gets one of the fixed ``Error: ...`` messages instead, see
:func:`src.error_kind.error_message`. Use :func:`convert` when a structured
result is more convenient than inspecting the text.
"""

import logging
from collections.abc import Iterable

from src.case_style import CaseStyle
from src.conversion_result import ConversionResult
from src.error_kind import error_message
from src.reassembler import reassemble
from src.tokenizer import Tokenizer
from src.word_case_error import WordCaseError

logger = logging.getLogger(__name__)

_TOKENIZER = Tokenizer()


def convert(
    value: object,
    style: CaseStyle,
    *,
    preserve_dot_acronyms: bool = False,
) -> ConversionResult:
    """Convert ``value`` to ``style`` and report success or the failure kind."""
    try:
        tokens = _TOKENIZER.tokenize(value)
    except WordCaseError as e:
        logger.debug("%s conversion rejected: %s", style.display_name, e)
        return ConversionResult(style, error_message(e.kind, style), e.kind)
    text = reassemble(tokens, style, preserve_dot_acronyms=preserve_dot_acronyms)
    return ConversionResult(style, text)


def convert_many(
    values: Iterable[object],
    style: CaseStyle,
    *,
    preserve_dot_acronyms: bool = False,
) -> list[ConversionResult]:
    """Convert each value independently, keeping input order."""
    return [
        convert(v, style, preserve_dot_acronyms=preserve_dot_acronyms) for v in values
    ]


def to_camel_case(value: object) -> str:
    """Convert text to camelCase, e.g. ``user-API-key`` -> ``userAPIKey``."""
    return convert(value, CaseStyle.CAMEL).text


def to_dot_case(value: object) -> str:
    """Convert text to dot.case, e.g. ``API_response-data`` -> ``api.response.data``."""
    return convert(value, CaseStyle.DOT).text


def to_kebab_case(value: object) -> str:
    """Convert text to kebab-case, e.g. ``Hello World`` -> ``hello-world``."""
    return convert(value, CaseStyle.KEBAB).text
