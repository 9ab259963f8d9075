"""Translation service for retrieving and interpolating translated messages.

The Translator owns all locale state (translation trees, format configs,
active locale list) and exposes lookup and formatting operations. Lookups
never raise: missing data degrades to a fallback locale, a default, the raw
key, or one of the bracketed markers defined below.
"""

import math
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from localekit.i18n import formatting
from localekit.i18n.exceptions import ConfigLoadError, InvalidFormatsError
from localekit.i18n.interpolation import interpolate, interpolate_array, is_number, serialize
from localekit.i18n.loader import FileTranslationLoader, PathLike, TranslationLoader, locale_from_path
from localekit.i18n.models import FORMATS_KEY, FormatConfig, TranslationCatalog, TranslationKey
from localekit.i18n.plurals import OTHER, plural_category
from localekit.i18n.resolvers import compute_fallbacks
from localekit.logging import get_module_logger

logger = get_module_logger()

DEFAULT_FALLBACK_LOCALE = "en"

PLURAL_NOT_OBJECT = "[plural: data not object]"
PLURAL_MISSING_FORM = "[plural: missing form]"
VARIANT_NOT_OBJECT = "[variant: data not object]"
VARIANT_NO_MATCH = "[variant: no match]"
UNSUPPORTED_NODE = "[unsupported translation type]"


def _entry_text(value: Any) -> str:
    return value if isinstance(value, str) else serialize(value)


def _positional_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def select_plural_form(node: Mapping[str, Any], locale: str, count: int) -> Optional[str]:
    """Pick the plural entry for a count.

    Tries the locale's plural category, then "other", then the exact count
    as a string.

    Returns:
        The entry text, or None if no candidate key exists.
    """
    for form in (plural_category(locale, count), OTHER, str(count)):
        if form in node:
            return _entry_text(node[form])
    return None


def handle_plural(node: Any, locale: str, params: Mapping[str, Any]) -> str:
    """Select a plural form using ``params["count"]``.

    A numeric count is truncated to an integer; a missing or non-numeric
    count counts as 1.
    """
    if not isinstance(node, Mapping):
        return PLURAL_NOT_OBJECT

    count = params.get("count")
    if not is_number(count):
        count = 1
    elif not isinstance(count, int):
        count = int(count) if math.isfinite(count) else 1

    form = select_plural_form(node, locale, count)
    return PLURAL_MISSING_FORM if form is None else form


def handle_variant(node: Any, params: Mapping[str, Any]) -> str:
    """Select a variant entry by parameter value.

    Parameters are checked in insertion order; the first string value that
    is a key of the node wins, so with several matching parameters the
    result depends on the order the caller built ``params`` in.
    """
    if not isinstance(node, Mapping):
        return VARIANT_NOT_OBJECT

    for value in params.values():
        if isinstance(value, str) and value in node:
            return _entry_text(node[value])

    if OTHER in node:
        return _entry_text(node[OTHER])
    return VARIANT_NO_MATCH


class Translator:
    """Service for translating messages and formatting values per locale.

    Attributes:
        loader: TranslationLoader used by the file based load operations.
        locales: Active locale list, most preferred first.
        fallback_locale: Locale consulted after all active locales.
        catalogs: TranslationCatalog per locale id.
        format_configs: FormatConfig per locale id, from ``_formats`` blocks.
        config: Current FormatConfig used by the format_* operations.
    """

    def __init__(
        self,
        loader: Optional[TranslationLoader] = None,
        fallback_locale: str = DEFAULT_FALLBACK_LOCALE,
    ):
        """Initialize Translator.

        Args:
            loader: Loader for locale files (default: FileTranslationLoader).
            fallback_locale: Locale consulted last (default: en).
        """
        self.loader = loader or FileTranslationLoader()
        self.reset()
        self.fallback_locale = fallback_locale
        logger.info("initialized_translator", fallback_locale=fallback_locale)

    def reset(self) -> None:
        """Clear all locale data and restore default settings."""
        self.locales: List[str] = []
        self.fallback_locale = DEFAULT_FALLBACK_LOCALE
        self.catalogs: Dict[str, TranslationCatalog] = {}
        self.format_configs: Dict[str, FormatConfig] = {}
        self.config = FormatConfig()

    # Locale registry

    def load_tree(self, locale: str, tree: Mapping[str, Any]) -> None:
        """Store or replace the translation tree of a locale.

        A ``_formats`` mapping at the top of the tree is layered onto the
        current config and stored as the locale's FormatConfig; it is not
        kept in the translation tree. The caller's mapping is not modified.

        Args:
            locale: Locale id (e.g., "en-US").
            tree: Parsed translation tree.

        Raises:
            InvalidFormatsError: If the ``_formats`` block has invalid values.
        """
        messages = dict(tree)
        formats = messages.get(FORMATS_KEY)
        if isinstance(formats, Mapping):
            del messages[FORMATS_KEY]
            self._register_formats(locale, formats)

        catalog = TranslationCatalog(locale=locale)
        catalog.merge(messages)
        self.catalogs[locale] = catalog
        logger.info(
            "loaded_locale_translations",
            locale=locale,
            key_count=len(catalog.messages),
        )

    def load(self, data: Mapping[str, Any]) -> None:
        """Merge translations for several locales at once.

        Each top-level key is a locale id whose mapping is deep-merged into
        that locale's existing tree. A ``_formats`` block applies to the
        dotted path of the mapping containing it, so
        ``{"fr": {"_formats": {...}}}`` configures "fr". A top-level
        ``_formats`` block updates the current config.

        Args:
            data: Mapping of locale id to translation tree.

        Raises:
            InvalidFormatsError: If a ``_formats`` block has invalid values.
        """
        if not isinstance(data, Mapping):
            logger.warning("ignored_non_mapping_data", data_type=type(data).__name__)
            return

        formats = data.get(FORMATS_KEY)
        if isinstance(formats, Mapping):
            self.configure(formats)

        for locale, subtree in data.items():
            if locale == FORMATS_KEY:
                continue
            if not isinstance(subtree, Mapping):
                logger.warning("ignored_non_mapping_locale_entry", locale=locale)
                continue

            catalog = self.catalogs.get(locale)
            if catalog is None:
                catalog = self.catalogs[locale] = TranslationCatalog(locale=locale)
            catalog.merge(self._extract_formats(locale, subtree))
            logger.info(
                "merged_locale_translations",
                locale=locale,
                key_count=len(catalog.messages),
            )

    def _extract_formats(self, context: str, tree: Mapping[str, Any]) -> Dict[str, Any]:
        """Return ``tree`` without ``_formats`` blocks, registering each one
        under the dotted path it was found at."""
        formats = tree.get(FORMATS_KEY)
        if isinstance(formats, Mapping):
            self._register_formats(context, formats)

        result = {}
        for key, value in tree.items():
            if key == FORMATS_KEY and isinstance(value, Mapping):
                continue
            if isinstance(value, Mapping):
                result[key] = self._extract_formats(f"{context}.{key}", value)
            else:
                result[key] = value
        return result

    def _register_formats(self, locale: str, formats: Mapping[str, Any]) -> None:
        config = self.config.merged(formats)
        self.format_configs[locale] = config
        if self.locales and self.locales[0] == locale:
            self.config = config
        logger.debug("registered_locale_formats", locale=locale)

    def load_locale(self, locale: str, path: PathLike) -> None:
        """Load a locale file and store it under ``locale``.

        Raises:
            ConfigLoadError: If the file cannot be read or parsed, or its
                ``_formats`` block is invalid.
        """
        tree = self.loader.load(path)
        try:
            self.load_tree(locale, tree)
        except InvalidFormatsError as e:
            logger.error("invalid_formats_block", locale=locale, file=str(path), error=str(e))
            raise ConfigLoadError(str(path), str(e)) from e

    def load_locale_from_file(self, path: PathLike) -> str:
        """Load a locale file, deriving the locale id from its file name.

        Returns:
            The derived locale id ("fr-CA" for "locales/fr-CA.json").

        Raises:
            ConfigLoadError: If no locale id can be derived or loading fails.
        """
        locale = locale_from_path(path)
        self.load_locale(locale, path)
        return locale

    def load_all(self, directory: PathLike) -> List[str]:
        """Load every locale file of a directory.

        Returns:
            Locale ids that were loaded.

        Raises:
            ConfigLoadError: If the directory or one of its files fails.
        """
        trees = self.loader.load_directory(directory)
        for locale, tree in trees.items():
            try:
                self.load_tree(locale, tree)
            except InvalidFormatsError as e:
                logger.error("invalid_formats_block", locale=locale, error=str(e))
                raise ConfigLoadError(str(directory), f"{locale}: {e}") from e
        logger.info("loaded_all_translations", locale_count=len(trees))
        return list(trees)

    def set_locale(self, locales: Union[str, Sequence[str]]) -> None:
        """Replace the active locale list.

        If the first locale has a stored FormatConfig it becomes the current
        config; otherwise the current config is left as is.

        Args:
            locales: A locale id or locale ids in preference order.
        """
        if isinstance(locales, str):
            locales = [locales]
        self.locales = list(locales)

        if self.locales and self.locales[0] in self.format_configs:
            self.config = self.format_configs[self.locales[0]]
        logger.debug("set_active_locales", locales=self.locales)

    def set_fallback_locale(self, locale: str) -> None:
        """Set the locale consulted after all active locales."""
        self.fallback_locale = locale

    def get_locale(self) -> str:
        """Return the most preferred active locale, or "" if none."""
        return self.locales[0] if self.locales else ""

    def get_locales(self) -> List[str]:
        """Return the active locale list."""
        return list(self.locales)

    def get_fallback_locale(self) -> str:
        """Return the fallback locale."""
        return self.fallback_locale

    def get_catalog(self, locale: str) -> Optional[TranslationCatalog]:
        """Return the catalog of a locale, or None if not loaded."""
        return self.catalogs.get(locale)

    def get_available_locales(self) -> List[str]:
        """Return ids of all loaded locales."""
        return list(self.catalogs.keys())

    # Lookup

    def _lookup(self, key: TranslationKey, locale: str) -> Tuple[bool, Any]:
        catalog = self.catalogs.get(locale)
        if catalog is None:
            return False, None
        return catalog.find_node(key)

    def _localized_translate(
        self, key: TranslationKey, locale: str, params: Mapping[str, Any]
    ) -> str:
        found, node = self._lookup(key, locale)
        if not found:
            return ""

        if isinstance(node, str):
            return interpolate(node, params)
        if isinstance(node, Mapping):
            if "count" in params:
                return interpolate(handle_plural(node, locale, params), params)
            return interpolate(handle_variant(node, params), params)
        if isinstance(node, list):
            return serialize(node)
        return UNSUPPORTED_NODE

    def translate(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Retrieve and interpolate a translated message.

        Named parameters fill ``%{name}`` and ``%<name>.fmt`` placeholders.
        Reserved parameters:

        - ``locale``: locale id searched before the active locales.
        - ``count``: selects a plural form from a mapping node.
        - ``default``: message used when no locale has the key.

        Without "count", a mapping node is treated as a variant map keyed by
        parameter values.

        Args:
            key: Dotted translation key.
            params: Named parameters.

        Returns:
            The first non-empty translation along the fallback chain, else
            the interpolated default, else the key itself.
        """
        if not key:
            return ""
        if not isinstance(params, Mapping):
            params = {}

        search_locales = list(self.locales)
        requested = params.get("locale")
        if isinstance(requested, str):
            search_locales.insert(0, requested)

        translation_key = TranslationKey.from_string(key)
        fallbacks = compute_fallbacks(search_locales, self.fallback_locale)
        for locale in fallbacks:
            translation = self._localized_translate(translation_key, locale, params)
            if translation:
                if search_locales and locale != search_locales[0]:
                    logger.debug(
                        "used_fallback_translation",
                        key=key,
                        requested_locale=search_locales[0],
                        fallback_locale=locale,
                    )
                return translation

        logger.debug("translation_not_found", key=key, locales=fallbacks)
        default = params.get("default")
        if isinstance(default, str):
            return interpolate(default, params)
        return key

    def tr(self, key: str, *params: Any) -> str:
        """Translate with positional parameters.

        Parameters fill ``{0}``, ``{1}``... and ``{}`` placeholders. A
        mapping node renders its "other" entry, else its first entry.

        Example:
            translator.tr("greeting", "Ann")  # "Hello {}" -> "Hello Ann"
        """
        if not key:
            return ""

        args = [_positional_text(param) for param in params]
        translation_key = TranslationKey.from_string(key)
        for locale in compute_fallbacks(self.locales, self.fallback_locale):
            _, node = self._lookup(translation_key, locale)
            if isinstance(node, str):
                return interpolate_array(node, args)
            if isinstance(node, Mapping) and node:
                if OTHER in node:
                    return interpolate_array(_entry_text(node[OTHER]), args)
                return interpolate_array(_entry_text(next(iter(node.values()))), args)

        logger.debug("translation_not_found", key=key, locales=self.locales)
        return key

    def tr_plural(self, key: str, count: int, *params: Any) -> str:
        """Translate a plural message with positional parameters.

        The count is inserted as the first positional parameter, so
        ``{"one": "{} item", "other": "{} items"}`` renders "5 items".
        """
        if not key:
            return ""

        args = [str(count)] + [_positional_text(param) for param in params]
        translation_key = TranslationKey.from_string(key)
        for locale in compute_fallbacks(self.locales, self.fallback_locale):
            _, node = self._lookup(translation_key, locale)
            if isinstance(node, Mapping):
                template = select_plural_form(node, locale, count)
                if template is None:
                    return PLURAL_MISSING_FORM
                return interpolate_array(template, args)
            if isinstance(node, str):
                return interpolate_array(node, args)

        logger.debug("translation_not_found", key=key, locales=self.locales)
        return key

    def key_exists(self, key: str) -> bool:
        """Check whether any locale in the fallback chain has ``key``.

        Never raises; unexpected failures are logged and reported as False.
        """
        if not key or not self.locales:
            return False

        try:
            translation_key = TranslationKey.from_string(key)
            for locale in compute_fallbacks(self.locales, self.fallback_locale):
                catalog = self.catalogs.get(locale)
                if catalog is not None and catalog.has_message(translation_key):
                    return True
        except Exception as e:  # pylint: disable=broad-except
            logger.warning("key_exists_failed", key=str(key), error=str(e))
            return False

        return False

    # Formatting

    def configure(self, formats: Mapping[str, Any]) -> None:
        """Layer a formats block onto the current config.

        Raises:
            InvalidFormatsError: If a present field has the wrong type.
        """
        self.config = self.config.merged(formats)
        logger.debug("configured_formats")

    def get_config(self) -> FormatConfig:
        """Return the current FormatConfig."""
        return self.config

    def format_number(self, value: Union[int, float]) -> str:
        """Format a number with the current number rules."""
        return formatting.format_number(value, self.config.number)

    def format_price(self, value: Union[int, float]) -> str:
        """Format a currency amount with the current currency rules."""
        return formatting.format_price(value, self.config.currency)

    def format_date(
        self,
        pattern: str = "",
        date_time: Optional[Union[datetime, date]] = None,
    ) -> str:
        """Format a date/time with a pattern alias or literal pattern.

        Args:
            pattern: "" for ISO 8601, one of long_time, short_time,
                long_date, short_date, long_date_time, short_date_time, or a
                literal pattern.
            date_time: Value to format (default: current local time).
        """
        return formatting.format_date(pattern, date_time, self.config)
