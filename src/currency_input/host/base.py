"""Text control abstract base class."""
from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Callable

ChangeCallback = Callable[[], None]


class TextControl(ABC):
    """The editable widget a field engine is attached to."""

    @abstractmethod
    def get_text(self) -> str:
        ...

    @abstractmethod
    def get_cursor_offset(self) -> int:
        ...

    @abstractmethod
    def set_text(self, text: str) -> None:
        """Replace the whole text. Fires change callbacks unless suspended."""
        ...

    @abstractmethod
    def set_cursor_offset(self, offset: int) -> None:
        ...

    @abstractmethod
    def on_before_change(self, callback: ChangeCallback) -> None:
        """Register *callback* to run before every text mutation."""
        ...

    @abstractmethod
    def on_after_change(self, callback: ChangeCallback) -> None:
        """Register *callback* to run after every text mutation."""
        ...

    @abstractmethod
    def remove_change_callbacks(self, before: ChangeCallback, after: ChangeCallback) -> None:
        ...

    @abstractmethod
    def suspend_change_notifications(self) -> None:
        ...

    @abstractmethod
    def resume_change_notifications(self) -> None:
        ...
