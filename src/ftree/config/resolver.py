"""Preset lookup and merging with global defaults."""

import logging
from datetime import datetime
from typing import Iterable, List, NamedTuple, Optional, Tuple, TypeVar, Union

from ftree.config.schema import Configuration, FilterDefaults, Preset
from ftree.exceptions import PresetNotFoundError
from ftree.types import SortKey, TypeFilter

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Excluded from every scan in addition to the preset's own exclusions
BUILTIN_EXCLUDES: Tuple[str, ...] = ("**/node_modules/**", "**/.git/**")

CATCH_ALL_PATTERN = "**/*"


class ResolvedPreset(NamedTuple):
    """A preset after default merging, ready for the scan pipeline.

    Instances are immutable; every stage of the pipeline reads the same object.

    Attributes:
        name: Name the preset was resolved under (preset or alias name).
        exclude: Defaults' exclusions followed by the preset's own.
        type_filter: Entry kind to keep, ANY when the preset does not restrict it.
        min_size, max_size: Size thresholds as written, parsed downstream.
        modified_within: Recency window as written (e.g. '7d'), parsed downstream.
        modified_after: Absolute recency cutoff.
        depth: Maximum number of path segments below the root.

    Example:
        >>> preset = ResolvedPreset(name="docs", extensions=("md", "txt"))
        >>> preset.include_patterns
        ('**/*.md', '**/*.txt')
        >>> preset.exclude_patterns
        ('**/node_modules/**', '**/.git/**')
    """

    name: str = ""
    description: Optional[str] = None
    patterns: Tuple[str, ...] = ()
    include: Tuple[str, ...] = ()
    extensions: Tuple[str, ...] = ()
    exclude: Tuple[str, ...] = ()
    type_filter: TypeFilter = TypeFilter.ANY
    min_size: Optional[str] = None
    max_size: Optional[str] = None
    modified_within: Optional[str] = None
    modified_after: Optional[datetime] = None
    depth: Optional[int] = None
    sort_by: Optional[SortKey] = None
    output: Optional[str] = None
    show_size: Optional[bool] = None
    show_date: Optional[bool] = None

    @property
    def include_patterns(self) -> Tuple[str, ...]:
        """Selection patterns: explicit patterns, else include, else one per extension, else everything."""
        if self.patterns:
            return self.patterns
        if self.include:
            return self.include
        if self.extensions:
            return tuple(f"**/*.{extension}" for extension in self.extensions)
        return (CATCH_ALL_PATTERN,)

    @property
    def exclude_patterns(self) -> Tuple[str, ...]:
        return BUILTIN_EXCLUDES + self.exclude


def merge_with_defaults(preset: Preset, defaults: Optional[FilterDefaults], name: str = "") -> ResolvedPreset:
    """Merge a raw preset with the global defaults.

    Scalar settings fall back field by field to the defaults. Exclusions are additive:
    the defaults' list comes first, followed by the preset's. The function is pure.

    Example:
        >>> defaults = FilterDefaults(depth=5, exclude=("**/dist/**",))
        >>> resolved = merge_with_defaults(Preset(depth=2, exclude=("**/test/**",)), defaults)
        >>> resolved.depth
        2
        >>> resolved.exclude
        ('**/dist/**', '**/test/**')
    """
    if defaults is None:
        defaults = FilterDefaults()

    return ResolvedPreset(
        name=name,
        description=preset.description,
        patterns=preset.patterns,
        include=preset.include,
        extensions=preset.extensions,
        exclude=defaults.exclude + preset.exclude,
        type_filter=preset.type_filter or TypeFilter.ANY,
        min_size=preset.min_size,
        max_size=preset.max_size,
        modified_within=preset.modified_within,
        modified_after=preset.modified_after,
        depth=_first_set(preset.depth, defaults.depth),
        sort_by=preset.sort_by,
        output=_first_set(preset.output, defaults.output),
        show_size=_first_set(preset.show_size, defaults.show_size),
        show_date=_first_set(preset.show_date, defaults.show_date),
    )


def resolve_preset(config: Configuration, name: str) -> ResolvedPreset:
    """Look up a preset (or, failing that, an alias) and merge it with the defaults.

    Args:
        config: A validated configuration.
        name: Preset or alias name.

    Returns:
        The resolved preset.

    Raises:
        PresetNotFoundError: If neither a preset nor an alias has this name.
    """
    if name in config.presets:
        raw = config.presets[name]
    elif name in config.aliases:
        logger.debug("Resolved '%s' as an alias", name)
        raw = config.aliases[name]
    else:
        raise PresetNotFoundError(name, list_presets(config))
    return merge_with_defaults(raw, config.defaults, name)


def list_presets(config: Configuration) -> List[str]:
    """Return preset names followed by alias names, in configuration order."""
    return [*config.presets, *config.aliases]


def preset_from_options(
    *,
    name: str = "quick-filter",
    patterns: Iterable[str] = (),
    extensions: Iterable[str] = (),
    exclude: Iterable[str] = (),
    type_filter: Union[str, TypeFilter, None] = None,
    min_size: Optional[str] = None,
    max_size: Optional[str] = None,
    modified_within: Optional[str] = None,
    depth: Optional[int] = None,
    sort_by: Union[str, SortKey, None] = None,
    output: Optional[str] = None,
    show_size: Optional[bool] = None,
    show_date: Optional[bool] = None,
) -> ResolvedPreset:
    """Build a preset directly from loose options, without any configuration.

    Raises:
        ValueError: If type_filter or sort_by is not a known value.
    """
    return ResolvedPreset(
        name=name,
        patterns=tuple(patterns),
        extensions=tuple(extensions),
        exclude=tuple(exclude),
        type_filter=TypeFilter(type_filter) if type_filter is not None else TypeFilter.ANY,
        min_size=min_size,
        max_size=max_size,
        modified_within=modified_within,
        depth=depth,
        sort_by=SortKey(sort_by) if sort_by is not None else None,
        output=output,
        show_size=show_size,
        show_date=show_date,
    )


def _first_set(value: Optional[T], fallback: Optional[T]) -> Optional[T]:
    return value if value is not None else fallback
