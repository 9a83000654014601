#!/usr/bin/env python3
"""Type a key sequence into an in-memory currency field and show each step.

Keys: digits and ``,``/``.`` are typed, ``<`` is backspace, ``>`` deletes
forward, ``~`` clears the field. Example::

    python scripts/type_keys.py "1234567.891<<5" --locale de_DE
"""
import argparse
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from currency_input.config import Settings
from currency_input.host.memory import InMemoryTextControl
from currency_input.listeners import ValueChangeListener
from currency_input.pipeline import ChangeObserverBridge
from currency_input.utils.logging import get_logger, setup_logging

logger = get_logger("type_keys")


class PrintingListener(ValueChangeListener):
    def on_changed(self, value: float) -> None:
        print(f"    value -> {value}")

    def on_cleared(self) -> None:
        print("    value -> (cleared)")


def show(field: InMemoryTextControl) -> str:
    text = field.get_text()
    cursor = field.get_cursor_offset()
    return f"'{text[:cursor]}|{text[cursor:]}'"


def main(keys: str, settings: Settings) -> None:
    """Feed *keys* one at a time and print the field after each."""
    field = InMemoryTextControl()
    bridge = ChangeObserverBridge(field, settings).attach()
    bridge.add_value_change_listener(PrintingListener())

    config = bridge.config
    print(f"Locale: {config.locale}  grouping={config.grouping_separator!r}  decimal={config.decimal_separator!r}")
    print("-" * 50)

    for key in keys:
        if key == "<":
            field.backspace()
        elif key == ">":
            field.delete_forward()
        elif key == "~":
            bridge.clear()
        else:
            field.insert(key)
        print(f"{key!r:>5}  {show(field):<24} {bridge.last_outcome.value if bridge.last_outcome else ''}")

    logger.info("session_finished", text=field.get_text(), value=bridge.value)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("keys", help="key sequence to type")
    parser.add_argument("--locale", help="override CURRENCY_INPUT_LOCALE")
    parser.add_argument("--digits-after", type=int, help="override CURRENCY_INPUT_DIGITS_AFTER_DECIMAL")
    args = parser.parse_args()

    overrides = {}
    if args.locale:
        overrides["locale"] = args.locale
    if args.digits_after is not None:
        overrides["digits_after_decimal"] = args.digits_after
    settings = Settings(**overrides)
    setup_logging(settings.log_level, json=False)

    if not args.keys:
        print("Error: empty key sequence")
        sys.exit(1)
    main(args.keys, settings)
