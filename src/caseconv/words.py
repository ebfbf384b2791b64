"""Word splitting: explicit separators (spaces/underscores) and case transitions."""

from __future__ import annotations

import re

# Runs of spaces or underscores.
_SEPARATOR_RE = re.compile(r"[ _]+")
# helloWorld -> hello World
_LOWER_UPPER_RE = re.compile(r"([a-z])([A-Z])")
# XMLParser -> XML Parser
_ACRONYM_RE = re.compile(r"([A-Z])([A-Z][a-z])")


def split_separated(text: str) -> list[str]:
    """Split on runs of spaces or underscores, dropping empty pieces."""
    return [part for part in _SEPARATOR_RE.split(text) if part]


def split_case_boundaries(text: str) -> list[str]:
    """Split letters-only text where the casing changes.

    A boundary goes between a lowercase and a following uppercase letter, and
    before the last capital of an uppercase run that is followed by a
    lowercase letter. All-uppercase and all-lowercase text stays one word.
    """
    spaced = _LOWER_UPPER_RE.sub(r"\1 \2", text)
    spaced = _ACRONYM_RE.sub(r"\1 \2", spaced)
    return spaced.split()


def lower_words(words: list[str]) -> list[str]:
    return [w.lower() for w in words]


def capitalize(word: str) -> str:
    """First character upper, the rest lower ("wORLD" -> "World")."""
    return word[:1].upper() + word[1:].lower()
