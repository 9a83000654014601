"""Value-change listeners and the ordered registry that notifies them."""
from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Iterator


class ValueChangeListener(ABC):
    """Receives the field's numeric value after every committed edit."""

    @abstractmethod
    def on_changed(self, value: float) -> None:
        """Called with the parsed value; NaN when the text does not parse."""
        ...

    @abstractmethod
    def on_cleared(self) -> None:
        """Called when the field was emptied."""
        ...


class ListenerRegistry:
    """Listeners in registration order."""

    def __init__(self):
        self._listeners: list[ValueChangeListener] = []

    def add(self, listener: ValueChangeListener) -> None:
        self._listeners.append(listener)

    def remove_all(self) -> None:
        self._listeners.clear()

    def notify_changed(self, value: float) -> None:
        for listener in list(self._listeners):
            listener.on_changed(value)

    def notify_cleared(self) -> None:
        for listener in list(self._listeners):
            listener.on_cleared()

    def __len__(self) -> int:
        return len(self._listeners)

    def __iter__(self) -> Iterator[ValueChangeListener]:
        return iter(list(self._listeners))
