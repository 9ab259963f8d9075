"""Parameter interpolation for translated messages.

Two template syntaxes are supported:

Named (used by ``Translator.translate``)::

    "Hello %{name}"          -> value inserted as text
    "%<price>.f EUR"         -> value rendered with a format code

Positional (used by ``Translator.tr`` / ``tr_plural``)::

    "{1} then {0}"           -> indexed parameters
    "{} and {}"              -> parameters in order

A named placeholder directly preceded by ``%`` is left untouched, so
``"100%%{x}"`` renders literally.
"""

import json
import math
import numbers
import re
from typing import Any, Mapping, Sequence

FIELD_PATTERN = re.compile(r"(?<!%)%\{([\w.]+)\}")
VALUE_PATTERN = re.compile(r"(?<!%)%<([\w.]+)>\.(\w)")
INDEX_PATTERN = re.compile(r"\{(\d+)\}")
EMPTY_BRACE_PATTERN = re.compile(r"\{\}")


def is_number(value: Any) -> bool:
    """Return True for real numbers; bools are not numbers here."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def serialize(value: Any) -> str:
    """Render a value as compact JSON text ("5", "true", '["a","b"]')."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)


def to_text(value: Any) -> str:
    """Render a parameter value for ``%{name}`` substitution."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return serialize(value)


def _format_integer(value: Any) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if not is_number(value) or not math.isfinite(value):
        return "0"
    return str(int(value))


def _format_float(value: Any) -> str:
    if not is_number(value):
        return "0"
    try:
        return format(float(value), "g")
    except OverflowError:
        # Integers beyond the float range
        return str(value)


def format_value(value: Any, code: str) -> str:
    """Render a parameter value for a ``%<name>.code`` placeholder.

    Args:
        value: Parameter value.
        code: Single-character format code. ``d``/``i`` truncate to an
            integer, ``f`` renders a float, ``s`` renders a string; any
            other code renders serialized text.

    Returns:
        Rendered text.
    """
    if code in ("d", "i"):
        return _format_integer(value)
    if code == "f":
        return _format_float(value)
    if code == "s":
        return value if isinstance(value, str) else serialize(value)
    return serialize(value)


def interpolate(text: str, params: Mapping[str, Any]) -> str:
    """Substitute named parameters into a message.

    Runs two passes: ``%{name}`` first, then ``%<name>.code``. Within a pass
    the scan is left to right and substituted values are never re-scanned.
    Placeholders whose name is missing from ``params`` stay unchanged.

    Args:
        text: Message template.
        params: Named parameters.

    Returns:
        Interpolated message.
    """
    if not isinstance(params, Mapping) or not text:
        return text

    def replace_field(match: re.Match) -> str:
        name = match.group(1)
        if name not in params:
            return match.group(0)
        return to_text(params[name])

    def replace_value(match: re.Match) -> str:
        name, code = match.group(1), match.group(2)
        if name not in params:
            return match.group(0)
        return format_value(params[name], code)

    text = FIELD_PATTERN.sub(replace_field, text)
    return VALUE_PATTERN.sub(replace_value, text)


def interpolate_array(text: str, params: Sequence[str]) -> str:
    """Substitute positional parameters into a message.

    ``{N}`` placeholders are replaced first, then every ``{}`` takes the next
    parameter starting again from index 0. The two passes keep separate
    counters, so "{0} {}" uses the first parameter twice. Placeholders
    without a matching parameter stay unchanged.

    Args:
        text: Message template.
        params: Positional parameters, already converted to text.

    Returns:
        Interpolated message.
    """
    if not params or not text:
        return text

    def replace_index(match: re.Match) -> str:
        index = int(match.group(1))
        if index < len(params):
            return params[index]
        return match.group(0)

    text = INDEX_PATTERN.sub(replace_index, text)

    remaining = iter(params)

    def replace_next(match: re.Match) -> str:
        return next(remaining, match.group(0))

    return EMPTY_BRACE_PATTERN.sub(replace_next, text)
