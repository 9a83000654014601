"""In-memory text control that behaves like a single-line edit widget.

Used by the tests and ``scripts/type_keys.py``. Every mutation helper fires the
before/after callbacks around the change, the way a GUI toolkit's text-watcher
does, unless notifications are suspended.
"""
from __future__ import annotations
import structlog
from .base import ChangeCallback, TextControl

logger = structlog.get_logger(__name__)


class InMemoryTextControl(TextControl):

    def __init__(self, text: str = "", cursor_offset: int | None = None):
        self._text = text
        self._cursor = len(text) if cursor_offset is None else cursor_offset
        self._check_offset(self._cursor)
        self._before: list[ChangeCallback] = []
        self._after: list[ChangeCallback] = []
        self._suspended = 0

    # ── TextControl ────────────────────────────────────────────────────

    def get_text(self) -> str:
        return self._text

    def get_cursor_offset(self) -> int:
        return self._cursor

    def set_text(self, text: str) -> None:
        # like a widget's setText, the cursor goes to the end
        self._mutate(text, len(text))

    def set_cursor_offset(self, offset: int) -> None:
        self._check_offset(offset)
        self._cursor = offset

    def on_before_change(self, callback: ChangeCallback) -> None:
        self._before.append(callback)

    def on_after_change(self, callback: ChangeCallback) -> None:
        self._after.append(callback)

    def remove_change_callbacks(self, before: ChangeCallback, after: ChangeCallback) -> None:
        if before in self._before:
            self._before.remove(before)
        if after in self._after:
            self._after.remove(after)

    def suspend_change_notifications(self) -> None:
        self._suspended += 1

    def resume_change_notifications(self) -> None:
        if self._suspended == 0:
            raise RuntimeError("resume_change_notifications called without a matching suspend")
        self._suspended -= 1

    @property
    def notifications_suspended(self) -> bool:
        return self._suspended > 0

    # ── Editing helpers ───────────────────────────────────────────────

    def insert(self, text: str) -> None:
        """Type *text* at the cursor."""
        self.replace(self._cursor, self._cursor, text)

    def backspace(self) -> None:
        """Delete the character before the cursor. No-op at offset 0."""
        if self._cursor == 0:
            return
        self.replace(self._cursor - 1, self._cursor, "")

    def delete_forward(self) -> None:
        """Delete the character after the cursor. No-op at the end."""
        if self._cursor >= len(self._text):
            return
        self.replace(self._cursor, self._cursor + 1, "")

    def replace(self, start: int, end: int, text: str) -> None:
        """Replace ``[start, end)`` with *text*; the cursor lands after the new text."""
        self._check_offset(start)
        self._check_offset(end)
        if start > end:
            raise ValueError(f"start {start} is after end {end}")
        self._mutate(self._text[:start] + text + self._text[end:], start + len(text))

    def select_all_and_delete(self) -> None:
        self.replace(0, len(self._text), "")

    # ── Internals ─────────────────────────────────────────────────────

    def _mutate(self, new_text: str, new_cursor: int) -> None:
        notify = not self._suspended
        if notify:
            for callback in list(self._before):
                callback()
        self._text = new_text
        self._cursor = new_cursor
        if notify:
            for callback in list(self._after):
                callback()
        else:
            logger.debug("text_set_silently", text=new_text)

    def _check_offset(self, offset: int) -> None:
        if not 0 <= offset <= len(self._text):
            raise ValueError(f"cursor offset {offset} outside [0, {len(self._text)}]")
