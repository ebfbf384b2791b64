"""Case-convention converters (camel, kebab, dot, pascal) built on one shared pipeline."""

from caseconv.convert import (
    convert,
    to_camel_case,
    to_dot_case,
    to_kebab_case,
    to_pascal_case,
)
from caseconv.errors import (
    CaseConversionError,
    CaseError,
    InvalidCharactersError,
    InvalidTypeError,
)
from caseconv.styles import Style, StyleRules, available_styles, rules_for

__all__ = [
    "CaseConversionError",
    "CaseError",
    "InvalidCharactersError",
    "InvalidTypeError",
    "Style",
    "StyleRules",
    "available_styles",
    "convert",
    "rules_for",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
    "to_pascal_case",
]
