"""Locale-aware number, currency and date/time formatting.

All functions are pure: they render a value with the rules of the config
they are given and never consult translator state.
"""

import math
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Optional, Union

from localekit.i18n.models import CurrencyConfig, DateTimeConfig, FormatConfig, NumberConfig

ISO_8601_PATTERN = "%Y-%m-%dT%H:%M:%S"

DATE_ALIASES = (
    "long_time",
    "short_time",
    "long_date",
    "short_date",
    "long_date_time",
    "short_date_time",
)

Number = Union[int, float]


def separate_thousands(digits: str, separator: str) -> str:
    """Group a string of digits by three from the right.

    Example:
        >>> separate_thousands("1234567", ",")
        '1,234,567'
    """
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return separator.join(groups)


def _round_scaled(magnitude: Number, fract_digits: int) -> int:
    # Half away from zero on the scaled (non-negative) magnitude
    scaled = magnitude * 10**fract_digits
    return int(Decimal(scaled).to_integral_value(rounding=ROUND_HALF_UP))


def format_number(value: Number, config: NumberConfig) -> str:
    """Render a number with grouping, fixed decimals and a sign symbol.

    Args:
        value: Number to format.
        config: Number rules (separators, fractional digits, sign symbols).

    Returns:
        Formatted number, e.g. "-1 234.50" with the default rules.

    Raises:
        ValueError: If value is NaN or infinite.
    """
    if not isinstance(value, int) and not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite number: {value}")

    digits = config.fract_digits
    scaled = _round_scaled(abs(value), digits)
    integer_part, fractional_part = divmod(scaled, 10**digits)

    result = separate_thousands(str(integer_part), config.thousand_separator)
    if digits > 0:
        result += config.decimal_symbol + str(fractional_part).zfill(digits)

    if value < 0:
        return config.negative_symbol + result
    return config.positive_symbol + result


def parse_number(text: str, config: NumberConfig) -> float:
    """Parse text produced by ``format_number`` back into a float.

    Args:
        text: Formatted number.
        config: The rules the text was formatted with.

    Returns:
        Parsed value.

    Raises:
        ValueError: If the text is not a number under these rules.
    """
    cleaned = text.strip()
    negative = False
    if config.negative_symbol and cleaned.startswith(config.negative_symbol):
        negative = True
        cleaned = cleaned[len(config.negative_symbol):]
    elif config.positive_symbol and cleaned.startswith(config.positive_symbol):
        cleaned = cleaned[len(config.positive_symbol):]

    if config.thousand_separator:
        cleaned = cleaned.replace(config.thousand_separator, "")
    if config.decimal_symbol and config.decimal_symbol != ".":
        cleaned = cleaned.replace(config.decimal_symbol, ".")

    number = float(cleaned.strip())
    return -number if negative else number


def _expand_tokens(pattern: str, render: Callable[[str], Optional[str]]) -> str:
    """Expand ``%X`` tokens in a pattern.

    ``render`` returns the replacement for a token code, or None to keep the
    token literally. A lone trailing ``%`` is kept.
    """
    parts = []
    pos = 0
    length = len(pattern)
    while pos < length:
        found = pattern.find("%", pos)
        if found == -1:
            parts.append(pattern[pos:])
            break
        parts.append(pattern[pos:found])
        if found + 1 >= length:
            parts.append("%")
            break
        code = pattern[found + 1]
        replacement = render(code)
        parts.append(f"%{code}" if replacement is None else replacement)
        pos = found + 2
    return "".join(parts)


def format_price(value: Number, config: CurrencyConfig) -> str:
    """Render a currency amount.

    The amount is formatted with the currency's own number rules, then
    placed into ``positive_format`` or ``negative_format``: ``%q`` is the
    number, ``%c`` the currency symbol and ``%p`` renders nothing (the sign
    is already part of the number).

    Example:
        >>> config = CurrencyConfig(symbol="$", positive_format="%c%q", thousand_separator=",")
        >>> format_price(1234.5, config)
        '$1,234.50'
    """
    number_config = NumberConfig(
        decimal_symbol=config.decimal_symbol,
        thousand_separator=config.thousand_separator,
        fract_digits=config.fract_digits,
        positive_symbol=config.positive_symbol,
        negative_symbol=config.negative_symbol,
    )
    formatted = format_number(value, number_config)
    pattern = config.negative_format if value < 0 else config.positive_format

    tokens = {"q": formatted, "c": config.symbol, "p": ""}
    return _expand_tokens(pattern, tokens.get)


def resolve_date_pattern(pattern: str, config: DateTimeConfig) -> str:
    """Map a pattern alias to its configured pattern.

    An empty pattern means ISO 8601; anything that is not an alias is used
    as a literal pattern.
    """
    if not pattern:
        return ISO_8601_PATTERN
    if pattern in DATE_ALIASES:
        return getattr(config, pattern)
    return pattern


def _name_at(names, index: int) -> str:
    if 0 <= index < len(names):
        return names[index]
    return ""


def format_date(
    pattern: str,
    date_time: Optional[Union[datetime, date]],
    config: FormatConfig,
) -> str:
    """Render a date/time with a named or literal pattern.

    Tokens: ``%H`` hour, ``%M``/``%i`` minute, ``%S``/``%s`` second, ``%d``
    day, ``%m`` month, ``%Y`` year, ``%l`` weekday name, ``%F`` month name,
    ``%a`` short weekday name, ``%b`` short month name. Unknown tokens are
    kept literally.

    Args:
        pattern: "" for ISO 8601, an alias such as "short_date", or a
            literal pattern.
        date_time: Value to render; a date renders at midnight and None
            means the current local time.
        config: Formatting rules providing patterns and names.

    Returns:
        Formatted date/time.
    """
    if date_time is None:
        moment = datetime.now()
    elif isinstance(date_time, datetime):
        moment = date_time
    else:
        moment = datetime(date_time.year, date_time.month, date_time.day)

    # Name lists start on Sunday
    weekday = moment.isoweekday() % 7
    month = moment.month - 1

    tokens = {
        "H": f"{moment.hour:02d}",
        "M": f"{moment.minute:02d}",
        "i": f"{moment.minute:02d}",
        "S": f"{moment.second:02d}",
        "s": f"{moment.second:02d}",
        "d": f"{moment.day:02d}",
        "m": f"{moment.month:02d}",
        "Y": str(moment.year),
        "l": _name_at(config.long_day_names, weekday),
        "F": _name_at(config.long_month_names, month),
        "a": _name_at(config.short_day_names, weekday),
        "b": _name_at(config.short_month_names, month),
    }
    return _expand_tokens(resolve_date_pattern(pattern, config.date_time), tokens.get)
