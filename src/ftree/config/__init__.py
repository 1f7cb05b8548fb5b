"""Configuration schema, loading and preset resolution."""

from .loader import default_config_file, load_config
from .resolver import ResolvedPreset, list_presets, merge_with_defaults, preset_from_options, resolve_preset
from .schema import Configuration, FilterDefaults, Preset

__all__ = [
    "Configuration",
    "FilterDefaults",
    "Preset",
    "ResolvedPreset",
    "default_config_file",
    "list_presets",
    "load_config",
    "merge_with_defaults",
    "preset_from_options",
    "resolve_preset",
]
