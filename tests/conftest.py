"""Shared test fixtures."""
import os
import pytest
from unittest.mock import MagicMock
from currency_input.config import Settings
from currency_input.host.memory import InMemoryTextControl
from currency_input.listeners import ValueChangeListener
from currency_input.models.locale import FormatConfig
from currency_input.pipeline import ChangeObserverBridge


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep CURRENCY_INPUT_* variables from the developer's shell out of Settings."""
    for key in list(os.environ):
        if key.startswith("CURRENCY_INPUT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def en_config():
    return FormatConfig.for_locale("en_US")


@pytest.fixture
def de_config():
    return FormatConfig.for_locale("de_DE")


@pytest.fixture
def field():
    return InMemoryTextControl()


@pytest.fixture
def listener():
    return MagicMock(spec=ValueChangeListener)


@pytest.fixture
def bridge(field, listener):
    b = ChangeObserverBridge(field, Settings(locale="en_US")).attach()
    b.add_value_change_listener(listener)
    return b
