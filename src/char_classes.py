"""Character predicates used to clean and split input text.

Only ASCII letters and digits take part in words. Anything else is either a
separator (space, hyphen, underscore) or dropped during cleaning.
"""

SEPARATORS = frozenset(" -_")

# Characters removed by ECMAScript String.prototype.trim(). Unlike str.strip()
# it keeps \x1c-\x1f and \x85 and removes the byte order mark \ufeff.
TRIM_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def is_upper_letter(ch: str) -> bool:
    """Return True for an ASCII uppercase letter."""
    return "A" <= ch <= "Z"


def is_word_char(ch: str) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_upper_letter(ch) or "a" <= ch <= "z" or "0" <= ch <= "9"


def is_separator(ch: str) -> bool:
    """Return True for a word separator (space, hyphen or underscore)."""
    return ch in SEPARATORS


def is_allowed_char(ch: str) -> bool:
    """Return True if the character survives cleaning."""
    return is_word_char(ch) or is_separator(ch)
