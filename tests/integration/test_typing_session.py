"""End-to-end typing sessions through an attached field."""
import math
import pytest
from unittest.mock import MagicMock, call
from currency_input.listeners import ValueChangeListener
from currency_input.models.edit import EditOutcome
from tests.factories import make_field, type_keys


@pytest.fixture
def recorder():
    return MagicMock(spec=ValueChangeListener)


class TestTypingSession:
    def test_type_overflow_then_backspace(self, recorder):
        field, bridge = make_field()
        bridge.add_value_change_listener(recorder)

        type_keys(field, "1234567.891")
        assert field.get_text() == "1,234,567.89"
        assert bridge.last_outcome is EditOutcome.REVERTED

        type_keys(field, "<<<")
        assert field.get_text() == "1,234,567"
        assert field.get_cursor_offset() == 9

        field.backspace()
        assert field.get_text() == "123,456"
        assert field.get_cursor_offset() == 7
        assert recorder.on_changed.call_args == call(123456.0)

    def test_clear_everything_by_backspace(self, recorder):
        field, bridge = make_field()
        bridge.add_value_change_listener(recorder)
        type_keys(field, "1.5<<<")
        assert field.get_text() == ""
        assert math.isnan(bridge.value)
        assert recorder.on_cleared.call_count == 1

    def test_swiss_apostrophe_grouping(self):
        field, bridge = make_field(locale="de_CH")
        type_keys(field, "1234567.5")
        assert field.get_text() == "1\u2019234\u2019567.5"
        assert bridge.value == 1234567.5

    def test_locale_switch_between_sessions(self):
        field, bridge = make_field()
        type_keys(field, "1234.5")
        bridge.set_locale("de_DE")
        field.select_all_and_delete()
        type_keys(field, "1234,5")
        assert field.get_text() == "1.234,5"
        assert bridge.value == 1234.5

    def test_limits_from_settings(self):
        field, bridge = make_field(digits_before=5, digits_after=1)
        type_keys(field, "1234567.89")
        assert field.get_text() == "12,345.8"

    def test_default_value_round_trip(self, recorder):
        field, bridge = make_field(default_value=0, default_format="%.2f")
        bridge.add_value_change_listener(recorder)
        type_keys(field, "99")
        bridge.clear()
        assert field.get_text() == "0.00"
        assert recorder.on_changed.call_args == call(0.0)
        field.select_all_and_delete()
        assert field.get_text() == "0.00"
        recorder.on_cleared.assert_called_once()
