"""Edit-cycle orchestrator: snapshot → reconcile → validate → format → cursor → value."""
from __future__ import annotations
import math
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from .config import Settings
from .host.base import TextControl
from .international.number_parsing import extract_value
from .listeners import ListenerRegistry, ValueChangeListener
from .models.edit import EditOutcome, EditSnapshot, EditState, FormattedResult
from .models.locale import FormatConfig
from .passes.cursor import map_cursor
from .passes.formatting import format_number
from .passes.reconciliation import insert_leading_zero, reconcile
from .passes.validation import validate

logger = structlog.get_logger(__name__)


class ChangeObserverBridge:
    """Keeps a text control's content formatted as a localized number.

    The host calls :meth:`before_edit` and :meth:`after_edit` around every text
    mutation (``attach`` registers them). Each cycle ends in exactly one of
    commit, revert or clear. Text written back by the bridge itself is done
    with host notifications suspended so it never starts a nested cycle.
    """

    def __init__(self, host: TextControl, settings: Settings | None = None):
        if settings is None:
            settings = Settings()
        self.host = host
        self._config = FormatConfig.for_locale(
            settings.locale,
            digits_before=settings.digits_before_decimal,
            digits_after=settings.digits_after_decimal,
        )
        self._listeners = ListenerRegistry()
        self._snapshot = EditSnapshot()
        self._state = EditState.IDLE
        self._last_outcome: EditOutcome | None = None
        self._writing_depth = 0
        self._attached = False
        self._default_value: float | None = None
        self._default_format: str | None = None
        self._default_text = ""
        if settings.default_value is not None:
            self._default_value = settings.default_value
            self._default_format = settings.default_format
            self._default_text = self._render_default()

    # ── Host wiring ────────────────────────────────────────────────────

    def attach(self) -> ChangeObserverBridge:
        if not self._attached:
            self.host.on_before_change(self.before_edit)
            self.host.on_after_change(self.after_edit)
            self._attached = True
        return self

    def detach(self) -> None:
        if self._attached:
            self.host.remove_change_callbacks(self.before_edit, self.after_edit)
            self._attached = False

    # ── Edit cycle ─────────────────────────────────────────────────────

    def before_edit(self) -> None:
        if self._writing_depth:
            return
        self._snapshot = EditSnapshot(
            text=self.host.get_text(),
            cursor_offset=self.host.get_cursor_offset(),
        )
        self._state = EditState.CAPTURING

    def after_edit(self) -> None:
        if self._writing_depth:
            return
        if self._state is not EditState.CAPTURING:
            logger.debug("after_edit_without_snapshot", snapshot=self._snapshot.text)
        self._state = EditState.PROCESSING
        try:
            self._last_outcome = self._process(self.host.get_text(), self.host.get_cursor_offset())
        finally:
            self._state = EditState.IDLE

    def _process(self, text: str, cursor_offset: int) -> EditOutcome:
        if not text:
            self._clear_field()
            return EditOutcome.CLEARED

        config = self._config
        text = reconcile(text, self._snapshot, cursor_offset, config)

        verdict = validate(text, config)
        if not verdict:
            logger.debug("edit_reverted", reason=verdict.reason, text=text, restored=self._snapshot.text)
            self._write(self._snapshot.text, self._snapshot.cursor_offset)
            return EditOutcome.REVERTED

        formatted = format_number(insert_leading_zero(text, config), config)
        result = FormattedResult(
            text=formatted,
            cursor_offset=map_cursor(self._snapshot.cursor_offset, len(self._snapshot.text), len(formatted)),
        )
        self._write(result.text, result.cursor_offset)
        logger.debug("edit_committed", text=result.text, cursor=result.cursor_offset)
        if result.text:
            self._listeners.notify_changed(self.value)
        else:
            self._listeners.notify_cleared()
        return EditOutcome.COMMITTED

    def _clear_field(self) -> None:
        if self._default_text:
            self._write(self._default_text, len(self._default_text))
        logger.debug("edit_cleared", default_text=self._default_text)
        self._listeners.notify_cleared()

    @contextmanager
    def _writing(self) -> Iterator[None]:
        self._writing_depth += 1
        self.host.suspend_change_notifications()
        try:
            yield
        finally:
            self.host.resume_change_notifications()
            self._writing_depth -= 1

    def _write(self, text: str, cursor_offset: int) -> None:
        with self._writing():
            self.host.set_text(text)
            self.host.set_cursor_offset(min(cursor_offset, len(text)))

    # ── Public surface ─────────────────────────────────────────────────

    @property
    def config(self) -> FormatConfig:
        return self._config

    @property
    def state(self) -> EditState:
        return self._state

    @property
    def last_outcome(self) -> EditOutcome | None:
        return self._last_outcome

    @property
    def default_text(self) -> str:
        return self._default_text

    @property
    def value(self) -> float:
        """Numeric value of the current text; NaN when it does not parse."""
        return extract_value(self.host.get_text(), self._config)

    def set_locale(self, locale: str) -> None:
        """Reload separators for *locale*; takes effect on the next edit."""
        self._config = self._config.reload(locale)
        if self._default_value is not None:
            self._default_text = self._render_default()
        logger.info(
            "locale_reloaded",
            locale=locale,
            grouping=self._config.grouping_separator,
            decimal=self._config.decimal_separator,
        )

    def set_digits_before_decimal(self, digits: int | None) -> None:
        self._config = self._config.with_limits(digits_before=digits)

    def set_digits_after_decimal(self, digits: int) -> None:
        self._config = self._config.with_limits(digits_after=digits)

    def set_default_value(self, value: float, display_format: str = "%.2f") -> None:
        """Precompute the text shown when the field is cleared and display it.

        *display_format* is a printf-style pattern; its ``.`` is rendered with
        the locale's decimal separator.
        """
        self._default_value = value
        self._default_format = display_format
        self._default_text = self._render_default()
        self._write(self._default_text, len(self._default_text))

    def clear(self) -> None:
        """Show the default text and notify listeners right away."""
        self._write(self._default_text, len(self._default_text))
        value = self.value
        if math.isnan(value):
            self._listeners.notify_cleared()
        else:
            self._listeners.notify_changed(value)

    def add_value_change_listener(self, listener: ValueChangeListener) -> None:
        self._listeners.add(listener)

    def remove_all_value_change_listeners(self) -> None:
        self._listeners.remove_all()

    def _render_default(self) -> str:
        rendered = self._default_format % self._default_value
        return rendered.replace(".", self._config.decimal_separator)
