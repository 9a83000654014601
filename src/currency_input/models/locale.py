"""Locale-derived formatting settings for a single input field.

``FormatConfig`` is the snapshot every pass reads: which characters group the
integer digits, which one starts the fraction, and how many digits are allowed
on each side. It is rebuilt whenever the locale changes and is otherwise
treated as immutable.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from currency_input.international.separators import resolve_separators


class FormatConfig(BaseModel):
    """Separators and digit limits for one field."""

    model_config = ConfigDict(frozen=True)

    grouping_separator: str = Field(default=",", min_length=1, max_length=1)
    decimal_separator: str = Field(default=".", min_length=1, max_length=1)
    digits_before_separator: int | None = Field(default=None, ge=1)
    digits_after_separator: int = Field(default=2, ge=0)
    locale: str = "en_US"

    @model_validator(mode="after")
    def _separators_differ(self) -> FormatConfig:
        if self.grouping_separator == self.decimal_separator:
            raise ValueError(
                f"grouping and decimal separator must differ, both are {self.decimal_separator!r}"
            )
        return self

    @classmethod
    def for_locale(
        cls,
        locale: str,
        digits_before: int | None = None,
        digits_after: int = 2,
    ) -> FormatConfig:
        grouping, decimal = resolve_separators(locale)
        return cls(
            grouping_separator=grouping,
            decimal_separator=decimal,
            digits_before_separator=digits_before,
            digits_after_separator=digits_after,
            locale=locale,
        )

    def reload(self, locale: str) -> FormatConfig:
        """Return a config for *locale*, keeping the current digit limits."""
        return FormatConfig.for_locale(
            locale,
            digits_before=self.digits_before_separator,
            digits_after=self.digits_after_separator,
        )

    def with_limits(
        self,
        *,
        digits_before: int | None = ...,  # type: ignore[assignment]
        digits_after: int | None = None,
    ) -> FormatConfig:
        """Return a copy with new digit limits.

        ``digits_before`` accepts ``None`` to mean unbounded, so leaving it out
        is signalled with ``...``.
        """
        data = self.model_dump()
        if digits_before is not ...:
            data["digits_before_separator"] = digits_before
        if digits_after is not None:
            data["digits_after_separator"] = digits_after
        return FormatConfig(**data)
