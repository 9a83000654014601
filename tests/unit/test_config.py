"""Test settings loading."""
import pytest
from pydantic import ValidationError
from currency_input.config import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.locale == "en_US"
        assert settings.digits_before_decimal is None
        assert settings.digits_after_decimal == 2
        assert settings.default_value is None

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("CURRENCY_INPUT_LOCALE", "de_DE")
        monkeypatch.setenv("CURRENCY_INPUT_DIGITS_AFTER_DECIMAL", "3")
        settings = Settings()
        assert settings.locale == "de_DE"
        assert settings.digits_after_decimal == 3

    def test_kwargs_win(self, monkeypatch):
        monkeypatch.setenv("CURRENCY_INPUT_LOCALE", "de_DE")
        assert Settings(locale="fr_FR").locale == "fr_FR"

    def test_negative_limit_rejected(self):
        with pytest.raises(ValidationError):
            Settings(digits_after_decimal=-1)
