"""Conversion errors.

Two failure modes exist and both are raised straight to the caller:

- ``InvalidTypeError``: the value is not a ``str``.
- ``InvalidCharactersError``: the trimmed text breaks the style's character rule.

``CaseError`` names the closed union of the two for callers that want to
handle them exhaustively.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from caseconv.styles import Style


class CaseConversionError(Exception):
    """Base class for every error raised by a conversion."""


class InvalidTypeError(CaseConversionError, TypeError):
    def __init__(self, actual_type: str) -> None:
        self.actual_type = actual_type
        super().__init__(f"Input must be a valid string. Received: {actual_type}")


class InvalidCharactersError(CaseConversionError, ValueError):
    def __init__(self, style: Style, offending_input: str, rule: str) -> None:
        self.style = style
        self.offending_input = offending_input
        super().__init__(rule)


CaseError = InvalidTypeError | InvalidCharactersError
