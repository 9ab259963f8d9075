"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation engine settings class

Example:
    ```python
    from localekit.configuration import settings

    fallback = settings.i18n.FALLBACK_LOCALE
    ```
"""

from localekit.configuration.i18n import I18nSettings
from localekit.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
