"""CLI for conversions: caseconv convert | styles | demo."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

from caseconv.config import load_config
from caseconv.convert import convert
from caseconv.errors import CaseConversionError
from caseconv.styles import Style, available_styles

logger = logging.getLogger(__name__)

# Sample input per style for `caseconv styles` (kebab takes letters only).
_STYLE_SAMPLES: dict[Style, str] = {
    Style.CAMEL: "hello_world again",
    Style.KEBAB: "XMLParser",
    Style.DOT: "hello_world again",
    Style.PASCAL: "my num value",
}

# (style, input) pairs replayed by `caseconv demo`; failures are shown, not raised.
DEMO_CASES: list[tuple[Style, Any]] = [
    (Style.CAMEL, "camel case"),
    (Style.CAMEL, "hello_world"),
    (Style.CAMEL, "hello_world again"),
    (Style.CAMEL, "SINGLE"),
    (Style.CAMEL, "   "),
    (Style.CAMEL, 123),
    (Style.CAMEL, "5n2M"),
    (Style.DOT, "dot case"),
    (Style.DOT, "hello_world"),
    (Style.DOT, "hello_world again"),
    (Style.DOT, "SINGLE"),
    (Style.DOT, "   "),
    (Style.DOT, 123),
    (Style.DOT, "5n2M"),
    (Style.KEBAB, "helloWorld"),
    (Style.KEBAB, "HelloWorld"),
    (Style.KEBAB, "HELLO"),
    (Style.KEBAB, "simple"),
    (Style.KEBAB, "5n2M"),
    (Style.KEBAB, 123),
    (Style.KEBAB, ""),
    (Style.PASCAL, "mynum"),
    (Style.PASCAL, "my_num_value"),
    (Style.PASCAL, "my num value"),
]


def parse_convert_args(args: list[str]) -> tuple[dict[str, Any], list[str]]:
    """Split --style and --config values from the text words.

    Returns ({"style": str | None, "config": Path | None}, remaining words).
    A flag with no value after it is kept as a word.
    """
    parsed: dict[str, Any] = {"style": None, "config": None}
    rest: list[str] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--style", "--config") and i + 1 < len(args):
            value = args[i + 1]
            if arg == "--style":
                parsed["style"] = value
            else:
                parsed["config"] = Path(value).resolve()
            i += 2
            continue
        rest.append(arg)
        i += 1
    return parsed, rest


def run_convert_argv(args: list[str]) -> int:
    """caseconv convert [--style <name>] [--config <path>] <text...>."""
    parsed, rest = parse_convert_args(args)
    if not rest:
        print(
            "Usage: caseconv convert [--style <name>] [--config <path>] <text...>",
            file=sys.stderr,
        )
        return 1

    try:
        style_name = parsed["style"] or load_config(parsed["config"])["style"]
        style = Style.parse(style_name)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    text = " ".join(rest)
    logger.debug("Converting %r to %s", text, style.value)
    try:
        result = convert(text, style)
    except CaseConversionError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    print(result)
    return 0


def run_styles() -> int:
    """caseconv styles: list styles with one example each."""
    for name in available_styles():
        style = Style(name)
        sample = _STYLE_SAMPLES[style]
        print(f"  {style.value:<8} {sample!r} -> {convert(sample, style)!r}")
    return 0


def run_demo() -> int:
    """caseconv demo: run the usage examples, printing results and caught errors."""
    for style, value in DEMO_CASES:
        try:
            result = convert(value, style)
        except CaseConversionError as e:
            print(f"  {style.value}({value!r}) ❌ {e}")
        else:
            print(f"  {style.value}({value!r}) -> {result!r}")
    return 0
