"""localekit - locale fallback, pluralization, interpolation and formatting."""

from localekit.i18n import Translator, create_translator

__all__ = ["Translator", "create_translator"]
