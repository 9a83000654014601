"""Test data factories for building test objects."""
from currency_input.config import Settings
from currency_input.host.memory import InMemoryTextControl
from currency_input.models.edit import EditSnapshot
from currency_input.pipeline import ChangeObserverBridge


def make_snapshot(text: str = "", cursor: int | None = None) -> EditSnapshot:
    return EditSnapshot(text=text, cursor_offset=len(text) if cursor is None else cursor)


def make_field(
    text: str = "",
    cursor: int | None = None,
    locale: str = "en_US",
    digits_before: int | None = None,
    digits_after: int = 2,
    **settings,
) -> tuple[InMemoryTextControl, ChangeObserverBridge]:
    """An attached bridge over an in-memory control preloaded with *text*."""
    control = InMemoryTextControl(text, cursor)
    bridge = ChangeObserverBridge(
        control,
        Settings(
            locale=locale,
            digits_before_decimal=digits_before,
            digits_after_decimal=digits_after,
            **settings,
        ),
    ).attach()
    return control, bridge


def type_keys(control: InMemoryTextControl, keys: str) -> None:
    """``<`` is backspace, ``>`` delete-forward, anything else is typed."""
    for key in keys:
        if key == "<":
            control.backspace()
        elif key == ">":
            control.delete_forward()
        else:
            control.insert(key)
