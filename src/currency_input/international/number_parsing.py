"""Locale-aware parsing of the displayed field text."""
from __future__ import annotations
import math
import re
from ..models.locale import FormatConfig


def _number_pattern(config: FormatConfig) -> re.Pattern:
    g = re.escape(config.grouping_separator)
    d = re.escape(config.decimal_separator)
    # digits with grouping anywhere in the integer part, optional fraction,
    # or a bare fraction like ",5"
    return re.compile(rf"^(?:[0-9][0-9{g}]*(?:{d}[0-9]*)?|{d}[0-9]+)$")


def parse_localized(raw_string: str, config: FormatConfig) -> float:
    """Parse a string written with *config*'s separators to float.

    Handles:
    - Grouped: "1,234.56" → 1234.56 (en), "1.234,56" → 1234.56 (de)
    - Plain: "1234.5" → 1234.5
    - Trailing separator: "0." → 0.0
    - Bare fraction: ".5" → 0.5
    """
    if not raw_string or not raw_string.strip():
        raise ValueError("Empty amount string")

    cleaned = raw_string.strip()
    if not _number_pattern(config).match(cleaned):
        raise ValueError(f"Not a number in {config.locale}: {raw_string!r}")

    cleaned = cleaned.replace(config.grouping_separator, "")
    cleaned = cleaned.replace(config.decimal_separator, ".")
    if cleaned.endswith("."):
        cleaned += "0"
    return float(cleaned)


def extract_value(text: str, config: FormatConfig) -> float:
    """Numeric value of the displayed *text*, or NaN when it does not parse."""
    try:
        return parse_localized(text, config)
    except ValueError:
        return math.nan
