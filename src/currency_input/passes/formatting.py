"""Display formatting: digit grouping and decimal reassembly."""
from __future__ import annotations
import re
from ..models.locale import FormatConfig

NON_DIGITS = re.compile(r"[^0-9]")
LEADING_ZEROS = re.compile(r"^0+(?!$)")
TRIPLETS = re.compile(r"(.{3})")


def group_digits(digits: str, separator: str) -> str:
    """Insert *separator* every three digits counting from the right.

    >>> group_digits("1234567", ",")
    '1,234,567'
    """
    grouped = TRIPLETS.sub(lambda m: m.group(1) + separator, digits[::-1])[::-1]
    if grouped.startswith(separator):
        grouped = grouped[len(separator):]
    return grouped


def format_number(text: str, config: FormatConfig) -> str:
    """Format validated text for display.

    Non-digits are dropped from both parts, leading zeros are stripped from the
    integer part, which is then regrouped. A bare ``0`` with no fraction
    formats to the empty string. Formatting an already formatted string
    returns it unchanged.
    """
    integer, sep, fraction = text.partition(config.decimal_separator)
    integer = LEADING_ZEROS.sub("", NON_DIGITS.sub("", integer))
    number = group_digits(integer, config.grouping_separator)
    if sep:
        number += config.decimal_separator + NON_DIGITS.sub("", fraction)
    if number == "0":
        return ""
    return number
