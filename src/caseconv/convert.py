"""Case conversion pipeline shared by every style.

validate type -> trim -> validate characters -> tokenize -> lowercase -> join
"""

from __future__ import annotations

from typing import Any

from caseconv.errors import InvalidCharactersError, InvalidTypeError
from caseconv.styles import Style, rules_for
from caseconv.words import lower_words


def convert(value: Any, style: Style | str) -> str:
    """Convert ``value`` to ``style``.

    Whitespace-only input returns "". Raises ``InvalidTypeError`` for non-str
    values and ``InvalidCharactersError`` when the trimmed text contains a
    character the style does not allow.
    """
    if not isinstance(value, str):
        raise InvalidTypeError(type(value).__name__)
    rules = rules_for(style)

    text = value.strip()
    if not text:
        return ""

    if not rules.is_allowed(text):
        raise InvalidCharactersError(rules.style, text, rules.allowed_description)

    words = lower_words(rules.tokenize(text))
    if not words:
        # Separators only, e.g. "___".
        return ""
    return rules.join(rules.case_words(words))


def to_camel_case(value: Any) -> str:
    """'hello_world again' -> 'helloWorldAgain'."""
    return convert(value, Style.CAMEL)


def to_kebab_case(value: Any) -> str:
    """'XMLParser' -> 'xml-parser'."""
    return convert(value, Style.KEBAB)


def to_dot_case(value: Any) -> str:
    """'hello_world again' -> 'hello.world.again'."""
    return convert(value, Style.DOT)


def to_pascal_case(value: Any) -> str:
    """'my_num value' -> 'MyNumValue'."""
    return convert(value, Style.PASCAL)
