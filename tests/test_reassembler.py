"""Tests for rebuilding cased output from word tokens."""

from src.case_style import CaseStyle
from src.reassembler import reassemble
from src.word_token import WordToken


def _tokens(*words: str) -> list[WordToken]:
    return [WordToken(w) for w in words]


def test_camel_first_word_lowercased() -> None:
    """Verify the first word is lowercased even when it is an acronym."""
    assert reassemble(_tokens("API", "response"), CaseStyle.CAMEL) == "apiResponse"
    assert reassemble(_tokens("HeLLo", "world"), CaseStyle.CAMEL) == "helloWorld"


def test_camel_later_words() -> None:
    """Verify capitalization of later words and preservation of acronyms."""
    assert reassemble(_tokens("user", "API", "key"), CaseStyle.CAMEL) == "userAPIKey"
    assert reassemble(_tokens("user", "nAME"), CaseStyle.CAMEL) == "userName"
    assert reassemble(_tokens("user", "Api"), CaseStyle.CAMEL) == "userApi"
    assert reassemble(_tokens("item", "2nd"), CaseStyle.CAMEL) == "item2nd"


def test_dot_lowercases_everything() -> None:
    """Verify dot.case lowercases acronyms too by default."""
    assert reassemble(_tokens("user", "API", "key"), CaseStyle.DOT) == "user.api.key"


def test_dot_preserve_acronyms() -> None:
    """Verify the opt-in acronym preservation for dot.case."""
    out = reassemble(
        _tokens("user", "API", "Key"), CaseStyle.DOT, preserve_dot_acronyms=True
    )
    assert out == "user.API.key"


def test_kebab() -> None:
    """Verify kebab-case joins lowercased words with hyphens."""
    assert reassemble(_tokens("Hello", "World"), CaseStyle.KEBAB) == "hello-world"
    out = reassemble(
        _tokens("user", "API", "key"), CaseStyle.KEBAB, preserve_dot_acronyms=True
    )
    assert out == "user-api-key"
