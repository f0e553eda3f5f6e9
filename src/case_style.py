"""Target casing styles for word-case conversion."""

from enum import Enum

from src.config_error import ConfigError


class CaseStyle(Enum):
    """Output casing rule, valued by its human-readable name."""

    CAMEL = "camelCase"
    DOT = "dot.case"
    KEBAB = "kebab-case"

    @property
    def display_name(self) -> str:
        """Name used in error messages, e.g. ``dot.case``."""
        return self.value


STYLE_NAMES: dict[str, CaseStyle] = {
    "camel": CaseStyle.CAMEL,
    "dot": CaseStyle.DOT,
    "kebab": CaseStyle.KEBAB,
}


def style_from_name(name: str) -> CaseStyle:
    """Look up a style by its short name (camel, dot, kebab)."""
    try:
        return STYLE_NAMES[name.strip().lower()]
    except (AttributeError, KeyError):
        choices = ", ".join(sorted(STYLE_NAMES))
        msg = f"Unknown case style {name!r} (expected one of: {choices})"
        raise ConfigError(msg) from None
