"""Case styles and the rule table every conversion reads.

Each ``StyleRules`` entry holds the four things a style decides:

- ``allowed``: which characters the trimmed input may contain
- ``tokenize``: how that text splits into words
- ``case_words``: how the lowercased words are re-cased
- ``join``: how the words are put back together
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from caseconv.words import capitalize, split_case_boundaries, split_separated


class Style(Enum):
    CAMEL = "camel"
    KEBAB = "kebab"
    DOT = "dot"
    PASCAL = "pascal"

    @classmethod
    def parse(cls, name: str) -> Style:
        """Return the style for a name such as "kebab", "kebab-case" or "camelCase".

        Raises ``ValueError`` for unknown names.
        """
        key = name.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            msg = f"Unknown style {name!r}; valid: {valid}"
            raise ValueError(msg) from None


_ALIASES: dict[str, str] = {
    "camelcase": "camel",
    "camel-case": "camel",
    "camel_case": "camel",
    "kebabcase": "kebab",
    "kebab-case": "kebab",
    "kebab_case": "kebab",
    "dotcase": "dot",
    "dot.case": "dot",
    "dot-case": "dot",
    "dot_case": "dot",
    "pascalcase": "pascal",
    "pascal-case": "pascal",
    "pascal_case": "pascal",
}

_LETTERS_RE = re.compile(r"[A-Za-z]+")
_WORDS_RE = re.compile(r"[A-Za-z _]+")

LETTERS_ONLY = "Input contains invalid characters (only letters allowed)"
LETTERS_SPACES_UNDERSCORES = "Input must only contain letters, spaces, or underscores"


@dataclass(frozen=True)
class StyleRules:
    style: Style
    allowed: re.Pattern[str]
    allowed_description: str
    tokenize: Callable[[str], list[str]]
    case_words: Callable[[list[str]], list[str]]
    join: Callable[[list[str]], str]

    def is_allowed(self, text: str) -> bool:
        return self.allowed.fullmatch(text) is not None


def _keep(words: list[str]) -> list[str]:
    return words


def _camel_words(words: list[str]) -> list[str]:
    return words[:1] + [capitalize(w) for w in words[1:]]


def _pascal_words(words: list[str]) -> list[str]:
    return [capitalize(w) for w in words]


STYLE_RULES: dict[Style, StyleRules] = {
    Style.CAMEL: StyleRules(
        style=Style.CAMEL,
        allowed=_WORDS_RE,
        allowed_description=LETTERS_SPACES_UNDERSCORES,
        tokenize=split_separated,
        case_words=_camel_words,
        join="".join,
    ),
    Style.KEBAB: StyleRules(
        style=Style.KEBAB,
        allowed=_LETTERS_RE,
        allowed_description=LETTERS_ONLY,
        tokenize=split_case_boundaries,
        case_words=_keep,
        join="-".join,
    ),
    Style.DOT: StyleRules(
        style=Style.DOT,
        allowed=_WORDS_RE,
        allowed_description=LETTERS_SPACES_UNDERSCORES,
        tokenize=split_separated,
        case_words=_keep,
        join=".".join,
    ),
    Style.PASCAL: StyleRules(
        style=Style.PASCAL,
        allowed=_WORDS_RE,
        allowed_description=LETTERS_SPACES_UNDERSCORES,
        tokenize=split_separated,
        case_words=_pascal_words,
        join="".join,
    ),
}


def rules_for(style: Style | str) -> StyleRules:
    """Look up the rules for a ``Style`` or a style name."""
    if not isinstance(style, Style):
        style = Style.parse(style)
    return STYLE_RULES[style]


def available_styles() -> list[str]:
    return [s.value for s in Style]
