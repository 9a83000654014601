"""Reconcile the raw post-edit text with the snapshot taken before the edit.

Two repairs run here, in order:

1. A backspace that removed a grouping separator is widened into a backspace
   over the digit in front of it. Otherwise the formatter would put the
   separator straight back and the keystroke would look ignored.
2. A trailing ``,`` or ``.`` is rewritten to the locale's decimal separator, so
   either punctuation key starts the fraction regardless of locale.
"""
from __future__ import annotations
import structlog
from ..models.edit import EditSnapshot
from ..models.locale import FormatConfig

logger = structlog.get_logger(__name__)

TYPED_DECIMAL_MARKS = (",", ".")


def deleted_grouping_separator(text: str, snapshot: EditSnapshot, cursor_offset: int, config: FormatConfig) -> bool:
    """True when the edit from *snapshot* to *text* only removed a grouping separator.

    *cursor_offset* is the host cursor after the edit was applied.
    """
    previous = snapshot.text
    sep = config.grouping_separator
    return (
        text.count(sep) == previous.count(sep) - 1
        and len(text) == len(previous) - 1
        and 0 < cursor_offset <= len(text)
        and cursor_offset < len(previous)
        and previous[cursor_offset] == sep
    )


def normalize_trailing_mark(text: str, config: FormatConfig) -> str:
    """Rewrite a trailing ``,``/``.`` keystroke into the configured decimal separator."""
    if not text:
        return text
    last = text[-1]
    if last.isdigit() or last == config.decimal_separator:
        return text
    if last in TYPED_DECIMAL_MARKS:
        return text[:-1] + config.decimal_separator
    return text


def reconcile(text: str, snapshot: EditSnapshot, cursor_offset: int, config: FormatConfig) -> str:
    if deleted_grouping_separator(text, snapshot, cursor_offset, config):
        logger.debug("separator_backspace_widened", cursor=cursor_offset, before=snapshot.text, after=text)
        text = text[:cursor_offset - 1] + text[cursor_offset:]
    return normalize_trailing_mark(text, config)


def insert_leading_zero(text: str, config: FormatConfig) -> str:
    """A lone decimal separator becomes ``0`` followed by it."""
    if text == config.decimal_separator:
        return "0" + text
    return text
