"""Edit validation -- decides whether an edit is kept or reverted.

Only four things make a partially typed number unrecoverable: too many integer
digits, too many fraction digits, grouping inside the fraction, or a second
decimal separator. Everything else is repaired by the formatter.
"""
from __future__ import annotations
import structlog
from ..models.edit import Verdict
from ..models.locale import FormatConfig

logger = structlog.get_logger(__name__)

ASCII_DIGITS = frozenset("0123456789")


def count_digits(text: str) -> int:
    return sum(1 for ch in text if ch in ASCII_DIGITS)


def split_parts(text: str, config: FormatConfig) -> tuple[str, str | None]:
    """Split on the first decimal separator into (integer, fraction or None)."""
    head, sep, tail = text.partition(config.decimal_separator)
    return head, (tail if sep else None)


def integer_limit_exceeded(text: str, config: FormatConfig) -> bool:
    if config.digits_before_separator is None:
        return False
    integer, _ = split_parts(text, config)
    integer = integer.replace(config.grouping_separator, "")
    return count_digits(integer) > config.digits_before_separator


def fraction_limit_exceeded(text: str, config: FormatConfig) -> bool:
    _, fraction = split_parts(text, config)
    if fraction is None:
        return False
    return count_digits(fraction) > config.digits_after_separator


def grouping_after_decimal(text: str, config: FormatConfig) -> bool:
    """Grouping is only valid in the integer part."""
    first_decimal = text.find(config.decimal_separator)
    if first_decimal < 0:
        return False
    return text.rfind(config.grouping_separator) > first_decimal


def validate(text: str, config: FormatConfig) -> Verdict:
    if integer_limit_exceeded(text, config):
        return Verdict(accepted=False, reason="integer_digits")
    if fraction_limit_exceeded(text, config):
        return Verdict(accepted=False, reason="fraction_digits")
    if grouping_after_decimal(text, config):
        return Verdict(accepted=False, reason="grouping_after_decimal")
    if text.count(config.decimal_separator) > 1:
        return Verdict(accepted=False, reason="multiple_decimal_separators")
    return Verdict(accepted=True)
