"""Test per-edit data models."""
import pytest
from pydantic import ValidationError
from currency_input.models.edit import EditSnapshot, FormattedResult, Verdict, EditState


class TestEditSnapshot:
    def test_empty_default(self):
        snapshot = EditSnapshot()
        assert snapshot.text == ""
        assert snapshot.cursor_offset == 0


class TestFormattedResult:
    def test_negative_cursor_rejected(self):
        with pytest.raises(ValidationError):
            FormattedResult(text="1", cursor_offset=-1)


class TestVerdict:
    def test_truthiness(self):
        assert Verdict(accepted=True)
        assert not Verdict(accepted=False, reason="fraction_digits")


class TestEditState:
    def test_values(self):
        assert EditState.IDLE.value == "idle"
        assert EditState("processing") is EditState.PROCESSING
