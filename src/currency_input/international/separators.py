"""Grouping/decimal separator conventions per locale."""
from __future__ import annotations
import structlog

logger = structlog.get_logger(__name__)

NBSP = "\u00a0"
NARROW_NBSP = "\u202f"

# (grouping, decimal)
LANGUAGE_SEPARATORS: dict[str, tuple[str, str]] = {
    'en': (',', '.'),
    'ja': (',', '.'),
    'zh': (',', '.'),
    'ko': (',', '.'),
    'hi': (',', '.'),
    'th': (',', '.'),
    'he': (',', '.'),
    'de': ('.', ','),
    'es': ('.', ','),
    'it': ('.', ','),
    'nl': ('.', ','),
    'pt': ('.', ','),
    'da': ('.', ','),
    'tr': ('.', ','),
    'id': ('.', ','),
    'el': ('.', ','),
    'ro': ('.', ','),
    'fr': (NARROW_NBSP, ','),
    'ru': (NBSP, ','),
    'uk': (NBSP, ','),
    'pl': (NBSP, ','),
    'cs': (NBSP, ','),
    'sk': (NBSP, ','),
    'hu': (NBSP, ','),
    'sv': (NBSP, ','),
    'nb': (NBSP, ','),
    'no': (NBSP, ','),
    'fi': (NBSP, ','),
}

# Territory overrides where the country differs from its language default
TERRITORY_SEPARATORS: dict[str, tuple[str, str]] = {
    'de_CH': ('\u2019', '.'),
    'it_CH': ('\u2019', '.'),
    'fr_CH': (NARROW_NBSP, '.'),
    'de_AT': (NBSP, ','),
    'pt_PT': (NBSP, ','),
    'es_MX': (',', '.'),
    'es_US': (',', '.'),
    'en_ZA': (NBSP, ','),
    'fr_CA': (NBSP, ','),
}

DEFAULT_SEPARATORS = (',', '.')


def split_locale(locale: str | None) -> tuple[str, str | None]:
    """Split a locale id like ``de-DE`` or ``pt_BR.UTF-8`` into (language, territory)."""
    if not locale:
        return "", None
    tag = locale.split(".", 1)[0].split("@", 1)[0].replace("-", "_")
    parts = [p for p in tag.split("_") if p]
    if not parts:
        return "", None
    language = parts[0].lower()
    territory = parts[1].upper() if len(parts) > 1 else None
    return language, territory


def resolve_separators(locale: str | None) -> tuple[str, str]:
    """Return (grouping, decimal) for *locale*, falling back to ``,`` and ``.``."""
    language, territory = split_locale(locale)
    if territory and f"{language}_{territory}" in TERRITORY_SEPARATORS:
        return TERRITORY_SEPARATORS[f"{language}_{territory}"]
    if language in LANGUAGE_SEPARATORS:
        return LANGUAGE_SEPARATORS[language]
    logger.warning("unknown_locale", locale=locale, fallback=DEFAULT_SEPARATORS)
    return DEFAULT_SEPARATORS
