"""Cursor translation after reformatting."""
from __future__ import annotations


def map_cursor(previous_offset: int, previous_length: int, new_length: int) -> int:
    """Shift the pre-edit cursor by the overall change in text length.

    Separators inserted or removed by the formatter move everything after the
    edit point by the same amount, so the cursor stays next to the digit just
    typed. Multi-character pastes can land a few positions off.
    """
    return max(previous_offset + (new_length - previous_length), 0)
