"""Logic for rebuilding a cased string from word tokens."""

from collections.abc import Sequence

from src.case_style import CaseStyle
from src.word_token import WordToken

JOINERS: dict[CaseStyle, str] = {
    CaseStyle.CAMEL: "",
    CaseStyle.DOT: ".",
    CaseStyle.KEBAB: "-",
}


def _camel_word(token: WordToken, index: int) -> str:
    """Case one word for camelCase.

    The first word is always lowercased. Later acronyms keep their case and
    later ordinary words are capitalized.
    """
    if index == 0:
        return token.text.lower()
    if token.is_acronym:
        return token.text
    return token.text[0].upper() + token.text[1:].lower()


def _lower_word(token: WordToken, *, preserve_acronyms: bool) -> str:
    """Case one word for the lowercase separated styles."""
    if preserve_acronyms and token.is_acronym:
        return token.text
    return token.text.lower()


def reassemble(
    tokens: Sequence[WordToken],
    style: CaseStyle,
    *,
    preserve_dot_acronyms: bool = False,
) -> str:
    """Join tokens under the casing rule of ``style``.

    ``preserve_dot_acronyms`` keeps acronym tokens uppercase in dot.case
    output. It is off by default, which lowercases every word.
    """
    if style is CaseStyle.CAMEL:
        words = [_camel_word(tok, i) for i, tok in enumerate(tokens)]
    else:
        keep = preserve_dot_acronyms and style is CaseStyle.DOT
        words = [_lower_word(tok, preserve_acronyms=keep) for tok in tokens]
    return JOINERS[style].join(words)
