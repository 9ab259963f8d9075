"""Locale resolution logic.

Computes the locale fallback chain walked by every lookup and negotiates a
preference list from an HTTP Accept-Language header.
"""

from typing import Iterable, List, Optional, Set

import structlog

logger = structlog.get_logger().bind(component="i18n.resolver")


def locale_root(locale: str) -> str:
    """Return the language part of a locale ("en" from "en-US-NY")."""
    return locale.split("-", 1)[0]


def locale_ancestry(locale: str) -> List[str]:
    """Return a locale and its parents, most specific first.

    Example:
        >>> locale_ancestry("en-US-NY")
        ['en-US-NY', 'en-US', 'en']
    """
    ancestry = []
    for index, char in enumerate(locale):
        if char == "-":
            ancestry.append(locale[:index])
    ancestry.append(locale)
    ancestry.reverse()
    return ancestry


def compute_fallbacks(
    requested_locales: Iterable[str],
    fallback_locale: Optional[str] = None,
) -> List[str]:
    """Build the ordered, deduplicated list of locales consulted by lookups.

    Each requested locale contributes its ancestry; the first occurrence of
    a locale id wins. The fallback locale is appended last when non-empty and
    not already present.

    Args:
        requested_locales: Locales in preference order (may contain duplicates).
        fallback_locale: Locale consulted after all requested locales.

    Returns:
        Locale ids in lookup order.
    """
    seen: Set[str] = set()
    result: List[str] = []

    for locale in requested_locales:
        for ancestor in locale_ancestry(locale):
            if ancestor not in seen:
                seen.add(ancestor)
                result.append(ancestor)

    if fallback_locale and fallback_locale not in seen:
        result.append(fallback_locale)

    return result


def parse_accept_language(accept_language: Optional[str]) -> List[str]:
    """Parse an Accept-Language header into language tags by preference.

    Parses "en-US,en;q=0.9,fr-FR;q=0.8" -> ["en-US", "en", "fr-FR"]. Tags with
    equal quality keep their header order. Invalid quality values count as
    1.0; the wildcard and tags with q=0 are dropped.

    Args:
        accept_language: Accept-Language header value.

    Returns:
        Language tags, most preferred first.
    """
    if not accept_language:
        return []

    preferences = []
    for part in accept_language.split(","):
        lang_range = part.split(";")[0].strip()
        if not lang_range or lang_range == "*":
            continue

        quality = 1.0
        if ";" in part and "q=" in part:
            try:
                quality = float(part.split("q=")[1])
            except ValueError:
                quality = 1.0

        if quality <= 0:
            continue
        preferences.append((lang_range, quality))

    # sorted() is stable, so equal qualities keep header order
    return [lang for lang, _ in sorted(preferences, key=lambda x: x[1], reverse=True)]


class LocaleResolver:
    """Resolves the active locale list from request context.

    Resolution order:
    1. Explicit locale list (if any)
    2. Accept-Language header
    3. Default locale
    """

    def __init__(self, default_locale: str = "en"):
        """Initialize locale resolver.

        Args:
            default_locale: Locale used when no preference is found.
        """
        self.default_locale = default_locale
        self.log = logger.bind(default_locale=default_locale)

    def resolve_from_header(
        self,
        accept_language: Optional[str],
        supported_locales: Optional[Iterable[str]] = None,
    ) -> List[str]:
        """Resolve a locale preference list from an Accept-Language header.

        When ``supported_locales`` is given, a tag is kept if it, or one of
        its ancestors, is supported; the matching supported id is returned.

        Args:
            accept_language: Accept-Language header value.
            supported_locales: Locale ids that have translations loaded.

        Returns:
            Locale ids, most preferred first; ``[default_locale]`` if none.
        """
        tags = parse_accept_language(accept_language)
        if supported_locales is not None:
            supported = {locale.lower(): locale for locale in supported_locales}
            matched = []
            for tag in tags:
                for ancestor in locale_ancestry(tag):
                    candidate = supported.get(ancestor.lower())
                    if candidate is not None:
                        if candidate not in matched:
                            matched.append(candidate)
                        break
            tags = matched

        if not tags:
            self.log.debug("no_matching_locale_in_header")
            return [self.default_locale]

        self.log.debug("resolved_from_header", locales=tags)
        return tags

    def resolve(
        self,
        locales: Optional[Iterable[str]] = None,
        accept_language: Optional[str] = None,
        supported_locales: Optional[Iterable[str]] = None,
    ) -> List[str]:
        """Resolve the locale preference list from the available context.

        Args:
            locales: Explicit preference list; wins when non-empty.
            accept_language: Accept-Language header value.
            supported_locales: Locale ids that have translations loaded.

        Returns:
            Locale ids, most preferred first.
        """
        explicit = [locale for locale in (locales or []) if locale]
        if explicit:
            self.log.debug("resolved_from_explicit", locales=explicit)
            return explicit
        return self.resolve_from_header(accept_language, supported_locales)
