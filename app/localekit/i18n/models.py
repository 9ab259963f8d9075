"""Translation models for the i18n system.

Defines the per-locale translation catalog, the dotted translation key and
the pydantic models describing locale formatting rules.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from localekit.i18n.exceptions import InvalidFormatsError

FORMATS_KEY = "_formats"


@dataclass(frozen=True)
class TranslationKey:
    """Represents a dotted translation key (e.g., "menu.file.open").

    Frozen to ensure immutability and hashability for caching.

    Attributes:
        segments: Path segments walked from the root of a locale tree.
    """

    segments: Tuple[str, ...]

    def __str__(self) -> str:
        """Return full dot-separated key path."""
        return ".".join(self.segments)

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from dot-separated string.

        Empty segments in the middle are kept ("a..b" has three segments);
        a single trailing dot does not produce an empty last segment.

        Args:
            key_string: Dot-separated key (e.g., "menu.file.open").

        Returns:
            TranslationKey instance.
        """
        if not key_string:
            return cls(segments=())
        parts = key_string.split(".")
        if parts[-1] == "":
            parts.pop()
        return cls(segments=tuple(parts))


@dataclass
class TranslationCatalog:
    """Container for the translation tree of a single locale.

    Attributes:
        locale: Locale id this catalog is for (e.g., "en-US").
        messages: Nested mapping {segment: str | list | mapping}.
        loaded_at: Timestamp (ISO 8601) when the tree was stored.
    """

    locale: str
    messages: Dict[str, Any] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def __post_init__(self):
        if self.loaded_at is None:
            self.loaded_at = datetime.now(timezone.utc).isoformat()

    def find_node(self, key: TranslationKey) -> Tuple[bool, Any]:
        """Walk the tree along the key path.

        Args:
            key: TranslationKey to resolve.

        Returns:
            ``(found, node)``. ``found`` is False when a segment is missing or
            an intermediate node is not a mapping; a null leaf is found with
            node None.
        """
        node: Any = self.messages
        for part in key.segments:
            if not isinstance(node, Mapping) or part not in node:
                return False, None
            node = node[part]
        return True, node

    def get_node(self, key: TranslationKey) -> Optional[Any]:
        """Return the node at the key, or None if missing or null."""
        return self.find_node(key)[1]

    def has_message(self, key: TranslationKey) -> bool:
        """Check if a node, including a null one, exists for the given key."""
        return self.find_node(key)[0]

    def merge(self, messages: Mapping[str, Any]) -> None:
        """Deep-merge a mapping into this catalog.

        Mappings are merged recursively, every other value replaces the
        existing entry.

        Args:
            messages: Mapping to merge.
        """
        deep_merge(self.messages, messages)


def deep_merge(target: Dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(value, Mapping) and isinstance(existing, dict):
            deep_merge(existing, value)
        elif isinstance(value, Mapping):
            target[key] = _copy_tree(value)
        else:
            target[key] = value


def _copy_tree(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _copy_tree(v) for k, v in value.items()}
    if isinstance(value, list):
        return list(value)
    return value


class FormatSection(BaseModel):
    """Base model for a section of a formats block."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)


class CurrencyConfig(FormatSection):
    """Currency rendering rules.

    Pattern strings understand ``%q`` (formatted number), ``%c`` (symbol)
    and ``%p`` (sign placeholder, renders nothing).
    """

    symbol: str = "XXX"
    name: str = "Currency"
    short_name: str = "XXX"
    decimal_symbol: str = "."
    thousand_separator: str = " "
    fract_digits: int = Field(default=2, ge=0)
    positive_symbol: str = ""
    negative_symbol: str = "-"
    positive_format: str = "%c %p%q"
    negative_format: str = "%c %p%q"


class NumberConfig(FormatSection):
    """Plain number rendering rules."""

    decimal_symbol: str = "."
    thousand_separator: str = " "
    fract_digits: int = Field(default=2, ge=0)
    positive_symbol: str = ""
    negative_symbol: str = "-"


class DateTimeConfig(FormatSection):
    """Named date/time patterns."""

    long_time: str = "%H:%M:%S"
    short_time: str = "%H:%M"
    long_date: str = "%F %d, %Y"
    short_date: str = "%m/%d/%Y"
    long_date_time: str = "%F %d, %Y %H:%M:%S"
    short_date_time: str = "%m/%d/%Y %H:%M"


SECTIONS = ("currency", "number", "date_time")
NAME_LISTS = (
    "short_month_names",
    "long_month_names",
    "short_day_names",
    "long_day_names",
)


class FormatConfig(FormatSection):
    """Complete formatting rules of a locale.

    All fields have English defaults. Day name lists start on Sunday.
    """

    currency: CurrencyConfig = Field(default_factory=CurrencyConfig)
    number: NumberConfig = Field(default_factory=NumberConfig)
    date_time: DateTimeConfig = Field(default_factory=DateTimeConfig)
    short_month_names: List[str] = Field(
        default_factory=lambda: [
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        ]
    )
    long_month_names: List[str] = Field(
        default_factory=lambda: [
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ]
    )
    short_day_names: List[str] = Field(
        default_factory=lambda: ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    )
    long_day_names: List[str] = Field(
        default_factory=lambda: [
            "Sunday", "Monday", "Tuesday", "Wednesday",
            "Thursday", "Friday", "Saturday",
        ]
    )

    def merged(self, formats: Mapping[str, Any]) -> "FormatConfig":
        """Return a new config with the fields present in ``formats`` overridden.

        Sections that are not mappings and name lists that are not lists are
        ignored, as are unknown keys. Fields absent from ``formats`` keep
        their current value.

        Args:
            formats: A formats block, e.g. ``{"currency": {"symbol": "$"}}``.

        Returns:
            New FormatConfig; self is left untouched.

        Raises:
            InvalidFormatsError: If a present field has the wrong type.
        """
        data = self.model_dump()
        if isinstance(formats, Mapping):
            for section in SECTIONS:
                block = formats.get(section)
                if isinstance(block, Mapping):
                    data[section].update(block)
            for names in NAME_LISTS:
                value = formats.get(names)
                if isinstance(value, list):
                    data[names] = list(value)

        try:
            return FormatConfig.model_validate(data)
        except ValidationError as e:
            section = None
            errors = e.errors()
            if errors and errors[0].get("loc"):
                section = str(errors[0]["loc"][0])
            raise InvalidFormatsError(
                f"Invalid formats block: {e.error_count()} error(s), first in {section}",
                section=section,
            ) from e
