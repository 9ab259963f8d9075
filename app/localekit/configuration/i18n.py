"""Translation engine settings."""

from pathlib import Path
from typing import List, Optional

from pydantic import Field

from localekit.configuration.base import ComponentSettings


class I18nSettings(ComponentSettings):
    """Locale loading and fallback configuration.

    Environment Variables:
        LOCALES_DIR: Directory containing <locale>.json / <locale>.yml files
        DEFAULT_LOCALE: Active locale list, comma separated (e.g. "fr-CA,fr")
        FALLBACK_LOCALE: Locale consulted after all active locales (default: en)

    Example:
        ```python
        from localekit.configuration import settings

        locales_dir = settings.i18n.LOCALES_DIR
        active = settings.i18n.default_locales
        ```
    """

    LOCALES_DIR: Optional[Path] = Field(default=None, alias="LOCALES_DIR")
    DEFAULT_LOCALE: str = Field(default="", alias="DEFAULT_LOCALE")
    FALLBACK_LOCALE: str = Field(default="en", alias="FALLBACK_LOCALE")

    @property
    def default_locales(self) -> List[str]:
        """Split DEFAULT_LOCALE into an ordered locale list.

        Returns:
            Locale ids, most preferred first. Empty entries are dropped.
        """
        return [part.strip() for part in self.DEFAULT_LOCALE.split(",") if part.strip()]
