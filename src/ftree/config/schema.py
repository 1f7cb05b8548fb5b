"""Typed, immutable configuration objects and their one-time validation.

A configuration arrives as a plain mapping (usually parsed from YAML). It is validated
exactly once by :meth:`Configuration.from_mapping`; everything downstream works with the
resulting immutable objects and never re-validates.
"""

import logging
from datetime import date, datetime, time, timezone
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Tuple, Type, TypeVar

from ftree.exceptions import ConfigurationError
from ftree.types import SortKey, TypeFilter

logger = logging.getLogger(__name__)

E = TypeVar("E", TypeFilter, SortKey)

# Configuration key -> attribute name
PRESET_KEYS = {
    "description": "description",
    "patterns": "patterns",
    "include": "include",
    "extensions": "extensions",
    "exclude": "exclude",
    "type": "type_filter",
    "minSize": "min_size",
    "maxSize": "max_size",
    "modifiedWithin": "modified_within",
    "modifiedAfter": "modified_after",
    "depth": "depth",
    "sortBy": "sort_by",
    "output": "output",
    "showSize": "show_size",
    "showDate": "show_date",
}

DEFAULTS_KEYS = {
    "depth": "depth",
    "output": "output",
    "showSize": "show_size",
    "showDate": "show_date",
    "exclude": "exclude",
}

# Accepted for compatibility with older configuration files; they have no effect
IGNORED_PRESET_KEYS = frozenset({"empty", "gitStatus"})


class FilterDefaults(NamedTuple):
    """Global fallbacks applied to every preset and alias."""

    depth: Optional[int] = None
    output: Optional[str] = None
    show_size: Optional[bool] = None
    show_date: Optional[bool] = None
    exclude: Tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, data: Any, where: str = "defaults") -> "FilterDefaults":
        values = _validate_fields(data, DEFAULTS_KEYS, where)
        return cls(**values)


class Preset(NamedTuple):
    """A named bundle of scan, filter, sort and output settings as written in the configuration.

    Every field is optional. Sizes and durations stay as the strings the user wrote; they are
    parsed when the pipeline consumes them.
    """

    description: Optional[str] = None
    patterns: Tuple[str, ...] = ()
    include: Tuple[str, ...] = ()
    extensions: Tuple[str, ...] = ()
    exclude: Tuple[str, ...] = ()
    type_filter: Optional[TypeFilter] = None
    min_size: Optional[str] = None
    max_size: Optional[str] = None
    modified_within: Optional[str] = None
    modified_after: Optional[datetime] = None
    depth: Optional[int] = None
    sort_by: Optional[SortKey] = None
    output: Optional[str] = None
    show_size: Optional[bool] = None
    show_date: Optional[bool] = None

    @classmethod
    def from_mapping(cls, data: Any, where: str) -> "Preset":
        values = _validate_fields(data, PRESET_KEYS, where, ignored=IGNORED_PRESET_KEYS)
        return cls(**values)


class Configuration(NamedTuple):
    """A validated configuration: version, optional defaults, presets and aliases.

    Example:
        >>> config = Configuration.from_mapping({
        ...     "version": "1.0",
        ...     "presets": {"docs": {"extensions": ["md"]}},
        ... })
        >>> config.presets["docs"].extensions
        ('md',)
        >>> Configuration.from_mapping({"version": "1.0", "presets": {}})
        Traceback (most recent call last):
        ...
        ftree.exceptions.ConfigurationError: Invalid config: presets must be a non-empty mapping
    """

    version: str
    presets: Mapping[str, Preset]
    defaults: Optional[FilterDefaults] = None
    aliases: Mapping[str, Preset] = {}

    @classmethod
    def from_mapping(cls, data: Any, source: Optional[str] = None) -> "Configuration":
        """Validate a parsed configuration mapping.

        Args:
            data: The parsed configuration, normally the result of loading a YAML document.
            source: Where the data came from, used in error messages.

        Returns:
            An immutable Configuration.

        Raises:
            ConfigurationError: If required keys are missing or any field is malformed.
        """
        try:
            return cls._from_mapping(data)
        except ConfigurationError as e:
            if source is None or e.source is not None:
                raise
            raise ConfigurationError(e.reason, source=source) from None

    @classmethod
    def _from_mapping(cls, data: Any) -> "Configuration":
        if not isinstance(data, Mapping):
            raise ConfigurationError("not a valid YAML object")

        version = data.get("version")
        if version is None or version == "":
            raise ConfigurationError("missing version")
        if not isinstance(version, (str, int, float)) or isinstance(version, bool):
            raise ConfigurationError(f"version must be a string, got {type(version).__name__}")

        presets_data = data.get("presets")
        if not isinstance(presets_data, Mapping) or not presets_data:
            raise ConfigurationError("presets must be a non-empty mapping")

        defaults = None
        if data.get("defaults") is not None:
            defaults = FilterDefaults.from_mapping(data["defaults"])

        presets = {str(name): Preset.from_mapping(raw, f"presets.{name}") for name, raw in presets_data.items()}

        aliases: Dict[str, Preset] = {}
        aliases_data = data.get("aliases")
        if aliases_data is not None:
            if not isinstance(aliases_data, Mapping):
                raise ConfigurationError("aliases must be a mapping")
            aliases = {str(name): Preset.from_mapping(raw, f"aliases.{name}") for name, raw in aliases_data.items()}

        return cls(version=str(version), presets=presets, defaults=defaults, aliases=aliases)


def _validate_fields(
    data: Any, keys: Mapping[str, str], where: str, ignored: frozenset = frozenset()
) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"{where} must be a mapping, got {type(data).__name__}")

    values: Dict[str, Any] = {}
    for key, raw in data.items():
        attribute = keys.get(key)
        if attribute is None:
            if key not in ignored:
                logger.warning("Ignoring unknown key '%s' in %s", key, where)
            continue
        if raw is None:
            continue
        field = f"{where}.{key}"
        if attribute in ("patterns", "include", "extensions", "exclude"):
            values[attribute] = _as_string_tuple(raw, field)
        elif attribute in ("show_size", "show_date"):
            values[attribute] = _as_bool(raw, field)
        elif attribute == "depth":
            values[attribute] = _as_depth(raw, field)
        elif attribute == "type_filter":
            values[attribute] = _as_enum(TypeFilter, raw, field)
        elif attribute == "sort_by":
            values[attribute] = _as_enum(SortKey, raw, field)
        elif attribute == "modified_after":
            values[attribute] = _as_datetime(raw, field)
        elif attribute in ("min_size", "max_size"):
            # YAML reads a bare `minSize: 1024` as an integer
            values[attribute] = _as_string(raw, field, allow_numbers=True)
        else:
            values[attribute] = _as_string(raw, field)
    return values


def _as_string(value: Any, field: str, allow_numbers: bool = False) -> str:
    if isinstance(value, str):
        return value
    if allow_numbers and isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise ConfigurationError(f"{field} must be a string, got {type(value).__name__}")


def _as_string_tuple(value: Any, field: str) -> Tuple[str, ...]:
    if not isinstance(value, list):
        raise ConfigurationError(f"{field} must be a list of strings, got {type(value).__name__}")
    items: List[str] = []
    for item in value:
        # Extensions such as `[7z, 3gp]` are fine, but YAML may hand numbers back
        if isinstance(item, (int, float)) and not isinstance(item, bool):
            item = str(item)
        if not isinstance(item, str):
            raise ConfigurationError(f"{field} must be a list of strings, got item {item!r}")
        items.append(item)
    return tuple(items)


def _as_bool(value: Any, field: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field} must be true or false, got {value!r}")
    return value


def _as_depth(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigurationError(f"{field} must be a non-negative integer, got {value!r}")
    return value


def _as_enum(enum_type: Type[E], value: Any, field: str) -> E:
    try:
        return enum_type(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_type)
        raise ConfigurationError(f"{field} must be one of: {choices}; got {value!r}")


def _as_datetime(value: Any, field: str) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time())
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            raise ConfigurationError(f"{field} must be an ISO 8601 date, got {value!r}")
    else:
        raise ConfigurationError(f"{field} must be an ISO 8601 date, got {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
