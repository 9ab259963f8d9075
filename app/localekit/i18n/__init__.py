"""i18n system - translation lookup and locale formatting.

Resolves a dotted translation key against a locale fallback chain, selects
literal, plural or variant entries, interpolates named or positional
parameters, and formats numbers, prices and dates per locale.

Main components:
- models: TranslationKey, TranslationCatalog, FormatConfig and its sections
- resolvers: locale ancestry, fallback chain, Accept-Language negotiation
- plurals: plural category rules
- interpolation: %{name} / %<name>.fmt and {N} / {} templates
- formatting: number, price and date rendering
- loader: TranslationLoader and FileTranslationLoader (JSON / YAML)
- translator: Translator service
"""

from localekit.i18n.exceptions import ConfigLoadError, I18nError, InvalidFormatsError
from localekit.i18n.factory import create_translator
from localekit.i18n.loader import FileTranslationLoader, TranslationLoader, locale_from_path
from localekit.i18n.models import (
    CurrencyConfig,
    DateTimeConfig,
    FormatConfig,
    NumberConfig,
    TranslationCatalog,
    TranslationKey,
)
from localekit.i18n.plurals import plural_category
from localekit.i18n.resolvers import (
    LocaleResolver,
    compute_fallbacks,
    locale_ancestry,
    parse_accept_language,
)
from localekit.i18n.translator import Translator

__all__ = [
    "ConfigLoadError",
    "I18nError",
    "InvalidFormatsError",
    "CurrencyConfig",
    "DateTimeConfig",
    "FormatConfig",
    "NumberConfig",
    "TranslationCatalog",
    "TranslationKey",
    "TranslationLoader",
    "FileTranslationLoader",
    "locale_from_path",
    "LocaleResolver",
    "compute_fallbacks",
    "locale_ancestry",
    "parse_accept_language",
    "plural_category",
    "Translator",
    "create_translator",
]
