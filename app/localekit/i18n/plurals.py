"""Plural category selection.

Each locale root belongs to one of a fixed set of rule families. Unknown
roots use the English-like family.
"""

from typing import Dict

from localekit.i18n.resolvers import locale_root

ZERO = "zero"
ONE = "one"
TWO = "two"
FEW = "few"
MANY = "many"
OTHER = "other"

CATEGORIES = (ZERO, ONE, TWO, FEW, MANY, OTHER)

# family id -> locale roots
_FAMILY_ROOTS = {
    1: ("en", "de", "nl", "sv", "da", "no", "nb", "nn", "fo", "es", "pt",
        "it", "bg", "el", "fi", "et", "he", "eo"),
    5: ("ru", "uk", "be", "hr", "sr", "bs", "sh"),
    21: ("pl",),
    7: ("cs", "sk"),
    9: ("fr", "ff", "kab"),
    3: ("ar",),
}

LOCALE_FAMILIES: Dict[str, int] = {
    root: family for family, roots in _FAMILY_ROOTS.items() for root in roots
}

DEFAULT_FAMILY = 1


def _mod(count: int, divisor: int) -> int:
    # Truncating remainder: the sign follows the dividend, so -1 % 10 == -1
    remainder = abs(count) % divisor
    return -remainder if count < 0 else remainder


def _english(count: int) -> str:
    return ONE if count == 1 else OTHER


def _slavic(count: int) -> str:
    mod10 = _mod(count, 10)
    mod100 = _mod(count, 100)
    if mod10 == 1 and mod100 != 11:
        return ONE
    if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
        return FEW
    if mod10 == 0 or 5 <= mod10 <= 9 or 11 <= mod100 <= 14:
        return MANY
    return OTHER


def _polish(count: int) -> str:
    if count == 1:
        return ONE
    mod10 = _mod(count, 10)
    mod100 = _mod(count, 100)
    if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
        return FEW
    return MANY


def _czech(count: int) -> str:
    if count == 1:
        return ONE
    if 2 <= count <= 4:
        return FEW
    return OTHER


def _french(count: int) -> str:
    return ONE if count < 2 else OTHER


def _arabic(count: int) -> str:
    if count == 0:
        return ZERO
    if count == 1:
        return ONE
    if count == 2:
        return TWO
    mod100 = _mod(count, 100)
    if 3 <= mod100 <= 10:
        return FEW
    if 11 <= mod100 <= 99:
        return MANY
    return OTHER


RULES = {
    1: _english,
    5: _slavic,
    21: _polish,
    7: _czech,
    9: _french,
    3: _arabic,
}


def plural_family(locale: str) -> int:
    """Return the rule family id used for a locale."""
    return LOCALE_FAMILIES.get(locale_root(locale), DEFAULT_FAMILY)


def plural_category(locale: str, count: int) -> str:
    """Select the plural category for a count in a locale.

    Examples:
        >>> plural_category("en", 1)
        'one'
        >>> plural_category("ru-RU", 5)
        'many'
        >>> plural_category("ar", 2)
        'two'

    Args:
        locale: Locale id; only its root (before the first "-") is used.
        count: Signed integer count.

    Returns:
        One of "zero", "one", "two", "few", "many", "other".
    """
    return RULES[plural_family(locale)](count)
