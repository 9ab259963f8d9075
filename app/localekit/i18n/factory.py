"""Factory functions for creating i18n components.

Provides a convenience function for initializing a Translator from the
library settings.
"""

from pathlib import Path
from typing import Optional, Sequence

import structlog
from localekit.configuration import I18nSettings
from localekit.i18n.loader import FileTranslationLoader
from localekit.i18n.translator import Translator

logger = structlog.get_logger()


def create_translator(
    translations_dir: Optional[Path] = None,
    locales: Optional[Sequence[str]] = None,
    fallback_locale: Optional[str] = None,
    settings: Optional[I18nSettings] = None,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Arguments left as None are read from the i18n settings (LOCALES_DIR,
    DEFAULT_LOCALE, FALLBACK_LOCALE). Every call returns a new instance.

    Args:
        translations_dir: Directory of <locale>.json / <locale>.yml files.
        locales: Active locale list, most preferred first.
        fallback_locale: Locale consulted after the active locales.
        settings: Settings to read defaults from (default: global settings).
        preload: Whether to load the translations directory immediately.

    Returns:
        Translator: Configured translator instance

    Raises:
        ConfigLoadError: If the translations directory or a file fails to load.

    Usage:
        # Use settings from the environment
        translator = create_translator()

        # Explicit directory and locales
        translator = create_translator(Path("locales"), locales=["fr-CA", "fr"])
    """
    if settings is None:
        from localekit.configuration import settings as app_settings

        settings = app_settings.i18n

    if translations_dir is None:
        translations_dir = settings.LOCALES_DIR
    if locales is None:
        locales = settings.default_locales
    if fallback_locale is None:
        fallback_locale = settings.FALLBACK_LOCALE

    translator = Translator(
        loader=FileTranslationLoader(),
        fallback_locale=fallback_locale,
    )

    if preload and translations_dir is not None:
        translator.load_all(translations_dir)
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            locale_count=len(translator.get_available_locales()),
        )
    else:
        logger.info(
            "translator_created_lazy",
            translations_dir=str(translations_dir) if translations_dir else None,
        )

    if locales:
        translator.set_locale(list(locales))

    return translator
