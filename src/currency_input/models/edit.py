"""Per-edit data models passed between the bridge and the passes."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class EditState(StrEnum):
    IDLE = "idle"
    CAPTURING = "capturing"
    PROCESSING = "processing"


class EditOutcome(StrEnum):
    """What the most recent ``after_edit`` call did."""

    COMMITTED = "committed"
    REVERTED = "reverted"
    CLEARED = "cleared"


class EditSnapshot(BaseModel):
    """Text and cursor captured just before the host applies an edit."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    cursor_offset: int = 0


class FormattedResult(BaseModel):
    """Text and cursor written back to the host on commit."""

    model_config = ConfigDict(frozen=True)

    text: str
    cursor_offset: int = Field(ge=0)


class Verdict(BaseModel):
    """Validator decision. ``reason`` is only set on rejection."""

    model_config = ConfigDict(frozen=True)

    accepted: bool
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.accepted
