"""Field configuration via environment variables with CURRENCY_INPUT_ prefix."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Currency input field configuration.

    All settings are read from environment variables prefixed with
    ``CURRENCY_INPUT_``; explicit keyword arguments win over the environment.
    """

    model_config = SettingsConfigDict(env_prefix="CURRENCY_INPUT_")

    # ── Locale ─────────────────────────────────────────────────────────────
    # Any of en_US, en-US, de, pt_BR.UTF-8; unknown ids fall back to "," and "."
    locale: str = "en_US"

    # ── Digit limits ───────────────────────────────────────────────────────
    # None means the integer part is unbounded
    digits_before_decimal: int | None = Field(default=None, ge=1)
    digits_after_decimal: int = Field(default=2, ge=0)

    # ── Default text ───────────────────────────────────────────────────────
    # Shown after clear() and when the user empties the field
    default_value: float | None = None
    default_format: str = "%.2f"

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = "INFO"
